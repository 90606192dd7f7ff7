"""
Domain Events Module

Exports all domain events and event handling infrastructure.
"""

from .domain_events import (
    CorrectiveTaskCreated,
    DomainEventDispatcher,
    DomainEventHandler,
    PartsRequestStatusChanged,
    TaskAssigned,
    TaskStatusChanged,
    get_event_dispatcher,
    publish_events,
)

__all__ = [
    "CorrectiveTaskCreated",
    "DomainEventDispatcher",
    "DomainEventHandler",
    "PartsRequestStatusChanged",
    "TaskAssigned",
    "TaskStatusChanged",
    "get_event_dispatcher",
    "publish_events",
]
