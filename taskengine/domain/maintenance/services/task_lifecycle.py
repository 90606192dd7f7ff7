"""
TaskLifecycleService Domain Service

Status changes on maintenance tasks, and the corrective follow-up tasks that
some of those changes spawn.
"""

import time
from collections.abc import Callable
from datetime import date, timedelta
from uuid import UUID

from pydantic import BaseModel

from ....core.observability import CORRECTIVE_TASKS_CREATED, get_logger
from ...shared.exceptions import TaskNotFoundError, ValidationError
from ..entities.task import CORRECTIVE_MAINTENANCE, Task
from ..events import CorrectiveTaskCreated, publish_events
from ..repositories import TaskRepository
from ..value_objects.enums import TaskStatus, Urgency

logger = get_logger(__name__)


class StatusChangeResult(BaseModel):
    task: Task
    corrective_task: Task | None = None


class TaskLifecycleService:
    """
    Domain service for task status changes.

    Args:
        task_repository: Task persistence
        today: Clock used for due and completion dates
        epoch_seconds: Clock used to make corrective task references unique
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        today: Callable[[], date] = date.today,
        epoch_seconds: Callable[[], float] = time.time,
    ):
        self._task_repository = task_repository
        self._today = today
        self._epoch_seconds = epoch_seconds

    async def _get_task(self, task_id: UUID) -> Task:
        task = await self._task_repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def _persist(self, task: Task) -> Task:
        saved = await self._task_repository.save(task)
        publish_events(task.get_domain_events())
        task.clear_domain_events()
        return saved

    async def change_status(
        self,
        task_id: UUID,
        new_status: TaskStatus,
        reason: str | None = None,
        assign_to_original_engineer: bool = False,
        urgency: Urgency = Urgency.MEDIUM,
    ) -> StatusChangeResult:
        """
        Move a task to a new status.

        Entering Requires Follow-up also creates a corrective task carrying
        the given urgency.

        Raises:
            TaskNotFoundError: If the task does not exist
            InvalidStatusTransitionError: If the move is not allowed
        """
        task = await self._get_task(task_id)
        old_status = task.status
        task.transition_to(
            new_status,
            reason=reason,
            completed_on=self._today() if new_status == TaskStatus.COMPLETED else None,
        )
        saved = await self._persist(task)
        logger.info(
            "Task status changed",
            task_id=str(task_id),
            old_status=old_status.value,
            new_status=new_status.value,
        )

        corrective = None
        if new_status == TaskStatus.REQUIRES_FOLLOW_UP:
            corrective = await self.create_corrective_task(
                task_id,
                reason or "Follow-up required",
                urgency,
                assign_to_original_engineer=assign_to_original_engineer,
                source="follow_up",
            )
        return StatusChangeResult(task=saved, corrective_task=corrective)

    async def create_corrective_task(
        self,
        original_task_id: UUID,
        reason: str,
        urgency: Urgency,
        assign_to_original_engineer: bool = False,
        days_from_now: int | None = None,
        additional_notes: str | None = None,
        source: str = "manual",
    ) -> Task:
        """
        Spawn a corrective maintenance task from an existing task.

        Args:
            original_task_id: Task the follow-up comes from
            reason: Why the follow-up is needed
            urgency: Sets the default due offset and the priority
            assign_to_original_engineer: Copy the original assignee
            days_from_now: Explicit due offset, overrides the urgency default
            additional_notes: Appended to the generated notes
            source: Metric label for where the request came from

        Returns:
            The created task

        Raises:
            TaskNotFoundError: If the original task does not exist
            ValidationError: If days_from_now is negative
        """
        if days_from_now is not None and days_from_now < 0:
            raise ValidationError("days_from_now", days_from_now, "must not be negative")

        original = await self._get_task(original_task_id)
        days = urgency.days_to_due if days_from_now is None else days_from_now
        due_date = self._today() + timedelta(days=days)

        notes = f"{reason}. Original task: {original.reference}"
        if additional_notes:
            notes += f". {additional_notes}"

        corrective = Task(
            reference=f"CORRECTIVE-{original.reference}-{int(self._epoch_seconds() * 1000)}",
            location_id=original.location_id,
            asset_id=original.asset_id,
            asset=original.asset,
            assigned_to=original.assigned_to if assign_to_original_engineer else None,
            due_date=due_date,
            task_type=CORRECTIVE_MAINTENANCE,
            status=TaskStatus.OPEN,
            priority=urgency.task_priority,
            notes=notes,
        )
        created = await self._task_repository.create(corrective)
        publish_events(
            [
                CorrectiveTaskCreated(
                    aggregate_id=created.id,
                    task_id=created.id,
                    original_task_id=original.id,
                    urgency=urgency,
                    due_date=due_date,
                )
            ]
        )
        CORRECTIVE_TASKS_CREATED.labels(source=source).inc()
        logger.info(
            "Corrective task created",
            task_id=str(created.id),
            reference=created.reference,
            original_task_id=str(original.id),
            urgency=urgency.value,
            due_date=due_date.isoformat(),
        )
        return created

    async def complete_task(self, task_id: UUID, note: str | None = None) -> Task:
        """
        Complete a task through legal transitions.

        Open and blocked tasks pass through In Progress first. Completing an
        already completed task changes nothing.
        """
        task = await self._get_task(task_id)
        if task.status == TaskStatus.COMPLETED:
            return task
        if task.status != TaskStatus.IN_PROGRESS:
            task.transition_to(TaskStatus.IN_PROGRESS)
        task.transition_to(TaskStatus.COMPLETED, reason=note, completed_on=self._today())
        saved = await self._persist(task)
        logger.info("Task completed", task_id=str(task_id))
        return saved

    async def update_notes(self, task: Task, notes: str) -> Task:
        task.notes = notes
        task.mark_updated()
        return await self._persist(task)
