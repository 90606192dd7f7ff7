"""
Domain Events for task lifecycle and assignment.

Entities record events as they change; services publish them after the change
has been persisted.
"""

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from ....core.observability import get_logger
from ...shared.base import DomainEvent
from ..value_objects.enums import PartsRequestStatus, TaskStatus, Urgency

logger = get_logger(__name__)


class TaskStatusChanged(DomainEvent):
    """Event raised when a task moves between statuses."""

    task_id: UUID
    old_status: TaskStatus
    new_status: TaskStatus
    reason: str | None = None


class TaskAssigned(DomainEvent):
    """Event raised when the optimizer gives a task to an engineer."""

    task_id: UUID
    engineer_id: UUID
    effective_date: date
    score: float


class CorrectiveTaskCreated(DomainEvent):
    """Event raised when a follow-up corrective task is spawned."""

    task_id: UUID
    original_task_id: UUID
    urgency: Urgency
    due_date: date


class PartsRequestStatusChanged(DomainEvent):
    """Event raised when a parts request moves through its lifecycle."""

    parts_request_id: UUID
    old_status: PartsRequestStatus
    new_status: PartsRequestStatus


class DomainEventHandler(ABC):
    """Receives task and parts events published after a change is stored."""

    @abstractmethod
    def handle(self, event: DomainEvent) -> None: ...

    def can_handle(self, event: DomainEvent) -> bool:
        return True


class DomainEventDispatcher:
    """In-process fan-out of lifecycle events to subscribed handlers."""

    def __init__(self):
        self._handlers: list[DomainEventHandler] = []

    def register_handler(self, handler: DomainEventHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unregister_handler(self, handler: DomainEventHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def dispatch(self, event: DomainEvent) -> None:
        for handler in [h for h in self._handlers if h.can_handle(event)]:
            try:
                handler.handle(event)
            except Exception as e:
                # A failing handler must not stop the others
                logger.error(
                    "Event handler failed",
                    event=type(event).__name__,
                    aggregate_id=str(event.aggregate_id),
                    handler=type(handler).__name__,
                    error=str(e),
                )

    def dispatch_all(self, events: list[DomainEvent]) -> None:
        for event in events:
            self.dispatch(event)


_dispatcher = DomainEventDispatcher()


def get_event_dispatcher() -> DomainEventDispatcher:
    return _dispatcher


def publish_events(events: list[DomainEvent]) -> None:
    """Hand stored-change events to every registered handler, in order."""
    _dispatcher.dispatch_all(events)
