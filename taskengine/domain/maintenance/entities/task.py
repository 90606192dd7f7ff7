"""Task entity for plant-room maintenance work."""

from datetime import date
from uuid import UUID

from pydantic import Field, field_validator

from ...shared.base import Entity
from ...shared.exceptions import BusinessRuleError, InvalidStatusTransitionError
from ..events import TaskAssigned, TaskStatusChanged
from ..value_objects.common import AssetInfo
from ..value_objects.enums import TaskPriority, TaskStatus

CORRECTIVE_MAINTENANCE = "Corrective Maintenance"


class Task(Entity):
    """
    Task entity representing one piece of maintenance work at a plant room.

    Tasks are created by hand or spawned as corrective follow-ups. The daily
    optimizer sets the assignee and notes; status changes go through
    ``transition_to`` so the lifecycle rules are enforced in one place.
    """

    reference: str = Field(min_length=1, max_length=120)
    location_id: UUID
    asset_id: UUID | None = None
    asset: AssetInfo | None = None
    assigned_to: UUID | None = None
    due_date: date
    task_type: str = Field(default="PPM", min_length=1)
    status: TaskStatus = Field(default=TaskStatus.OPEN)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    notes: str | None = None
    date_completed: date | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def parse_priority(cls, v):
        """Stored priorities are free text; unknown labels weigh as Low."""
        if isinstance(v, TaskPriority):
            return v
        return TaskPriority.parse(v)

    def is_valid(self) -> bool:
        """Validate business rules."""
        if self.status == TaskStatus.COMPLETED:
            return self.date_completed is not None
        return self.date_completed is None

    @property
    def is_corrective(self) -> bool:
        return self.task_type == CORRECTIVE_MAINTENANCE

    @property
    def is_assigned(self) -> bool:
        return self.assigned_to is not None

    @property
    def asset_type(self) -> str | None:
        return self.asset.asset_type if self.asset else None

    def is_overdue(self, reference_date: date) -> bool:
        """Overdue means due strictly before the reference date."""
        return self.due_date < reference_date

    def transition_to(
        self,
        new_status: TaskStatus,
        reason: str | None = None,
        completed_on: date | None = None,
    ) -> None:
        """
        Move the task to a new status.

        Args:
            new_status: Target status
            reason: Optional note recorded on the task
            completed_on: Completion date, required when completing

        Raises:
            InvalidStatusTransitionError: If the lifecycle forbids the move
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError(
                "task", self.id, self.status.value, new_status.value
            )
        if new_status == TaskStatus.COMPLETED and completed_on is None:
            raise BusinessRuleError(
                "A completion date is required to complete a task",
                {"task_id": str(self.id)},
            )

        old_status = self.status
        self.status = new_status
        if new_status == TaskStatus.COMPLETED:
            self.date_completed = completed_on
        if reason:
            self.notes = reason
        self.mark_updated()

        self.add_domain_event(
            TaskStatusChanged(
                aggregate_id=self.id,
                task_id=self.id,
                old_status=old_status,
                new_status=new_status,
                reason=reason,
            )
        )

    def assign(
        self, engineer_id: UUID, reason: str, effective_date: date, score: float
    ) -> None:
        """Record an optimizer assignment with its explanation note."""
        if self.status.is_terminal:
            raise BusinessRuleError(
                "Completed tasks cannot be assigned", {"task_id": str(self.id)}
            )
        self.assigned_to = engineer_id
        self.notes = reason
        self.mark_updated()

        self.add_domain_event(
            TaskAssigned(
                aggregate_id=self.id,
                task_id=self.id,
                engineer_id=engineer_id,
                effective_date=effective_date,
                score=score,
            )
        )
