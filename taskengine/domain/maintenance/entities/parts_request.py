"""Parts request entity linking a blocked task to its replacement parts."""

from datetime import date
from uuid import UUID

from pydantic import Field

from ...shared.base import Entity
from ...shared.exceptions import BusinessRuleError, InvalidStatusTransitionError
from ..events import PartsRequestStatusChanged
from ..value_objects.enums import PartsRequestStatus, Urgency
from .task import Task


class PartsRequest(Entity):
    """
    A request for parts raised against a task.

    Lifecycle: Requested -> Ordered -> Received -> Installed, or Cancelled
    before receipt. Once a corrective task is linked the link never changes.
    """

    reference: str = Field(min_length=1)
    task_id: UUID
    asset_id: UUID | None = None
    part_name: str = Field(min_length=1)
    part_number: str | None = None
    quantity: int = Field(default=1, ge=1)
    urgency: Urgency = Field(default=Urgency.MEDIUM)
    status: PartsRequestStatus = Field(default=PartsRequestStatus.REQUESTED)
    order_date: date | None = None
    received_date: date | None = None
    installed_date: date | None = None
    notes: str | None = None
    corrective_task_id: UUID | None = None

    def is_valid(self) -> bool:
        return bool(self.part_name) and self.quantity >= 1

    @property
    def description(self) -> str:
        """Quantity and part, with the part number when known."""
        text = f"{self.quantity}x {self.part_name}"
        if self.part_number:
            text += f" ({self.part_number})"
        return text

    def _move_to(self, new_status: PartsRequestStatus) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError(
                "parts_request", self.id, self.status.value, new_status.value
            )
        old_status = self.status
        self.status = new_status
        self.mark_updated()
        self.add_domain_event(
            PartsRequestStatusChanged(
                aggregate_id=self.id,
                parts_request_id=self.id,
                old_status=old_status,
                new_status=new_status,
            )
        )

    def mark_ordered(self, on: date) -> None:
        self._move_to(PartsRequestStatus.ORDERED)
        self.order_date = on

    def mark_received(self, on: date) -> None:
        self._move_to(PartsRequestStatus.RECEIVED)
        self.received_date = on

    def mark_installed(self, on: date) -> None:
        self._move_to(PartsRequestStatus.INSTALLED)
        self.installed_date = on

    def cancel(self) -> None:
        self._move_to(PartsRequestStatus.CANCELLED)

    def link_corrective_task(self, task: Task) -> None:
        """
        Record the corrective task spawned for this request.

        Raises:
            BusinessRuleError: If the task is not corrective maintenance or a
                different task is already linked
        """
        if not task.is_corrective:
            raise BusinessRuleError(
                "Only corrective maintenance tasks can be linked to a parts request",
                {"parts_request_id": str(self.id), "task_id": str(task.id)},
            )
        if self.corrective_task_id is not None and self.corrective_task_id != task.id:
            raise BusinessRuleError(
                "Parts request already linked to a corrective task",
                {
                    "parts_request_id": str(self.id),
                    "corrective_task_id": str(self.corrective_task_id),
                },
            )
        self.corrective_task_id = task.id
        self.mark_updated()
