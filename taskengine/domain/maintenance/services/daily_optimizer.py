"""
DailyAssignmentOptimizer Domain Service

One greedy pass over the open, unassigned tasks in the planning window. Each
task goes to the best scoring engineer who is available and under capacity,
in overdue-first, priority, due-date order.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from datetime import date, timedelta
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from ....core.observability import NOTIFICATION_FAILURES, get_logger, log_run_summary
from ...shared.exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    RepositoryError,
)
from ..entities.engineer import Engineer
from ..entities.task import Task
from ..events import publish_events
from ..repositories import (
    CalendarRepository,
    EngineerRepository,
    NotificationGateway,
    TaskRepository,
)
from ..value_objects.calendar import MAX_WORK_DAY_SEARCH, WorkCalendar
from ..value_objects.common import Notification
from ..value_objects.enums import NotificationPriority, NotificationType
from .assignment_scorer import DEFAULT_MIN_SCORE, AssignmentScorer, ScoreBreakdown
from .availability_calculator import AvailabilityCalculator
from .workload_tracker import DEFAULT_CAPACITY_CEILING, WorkloadTracker

logger = get_logger(__name__)

ASSIGNED_TITLE = "Task Auto-Assigned"
SUMMARY_TITLE = "Daily Schedule Optimization Complete"


class RunOutcome(str, Enum):
    IDLE = "idle"
    ASSIGNED = "assigned"
    ALL_SKIPPED = "all_skipped"
    ABORTED = "aborted"


class AssignmentDecision(BaseModel):
    """A committed assignment and why it was made."""

    task_id: UUID
    task_reference: str
    engineer_id: UUID
    engineer_name: str
    effective_date: date
    overdue: bool
    score: ScoreBreakdown
    note: str


class EngineerAssignmentSummary(BaseModel):
    engineer_id: UUID
    name: str
    count: int = 0
    task_ids: list[UUID] = Field(default_factory=list)
    final_load: int = 0


class AssignmentFailure(BaseModel):
    task_id: UUID
    error: str


class AssignmentRunSummary(BaseModel):
    """Result of one optimizer run."""

    run_date: date
    outcome: RunOutcome = RunOutcome.IDLE
    candidate_tasks: int = 0
    available_engineers: int = 0
    per_engineer: dict[UUID, EngineerAssignmentSummary] = Field(default_factory=dict)
    assignments: list[AssignmentDecision] = Field(default_factory=list)
    skipped_non_work_day: int = 0
    skipped_no_availability: int = 0
    skipped_below_threshold: int = 0
    deferred: int = 0
    write_failures: list[AssignmentFailure] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assigned_count(self) -> int:
        return len(self.assignments)


def task_sort_key(task: Task, reference_date: date) -> tuple[int, int, date]:
    """Overdue first, then higher priority, then earlier due date."""
    return (
        0 if task.is_overdue(reference_date) else 1,
        -task.priority.weight,
        task.due_date,
    )


def assignment_note(score: ScoreBreakdown, overdue: bool) -> str:
    flag = " (OVERDUE)" if overdue else ""
    return (
        f"Auto-assigned{flag}: {round(score.skill_score * 100)}% skill match, "
        f"{round(score.workload_score * 100)}% capacity available"
    )


class DailyAssignmentOptimizer:
    """
    Daily task assignment run.

    Runs must not overlap; the scheduler runs one at a time. Within a run,
    scoring and commits are strictly sequential so workload from earlier
    commits is seen by later tasks. Notifications are sent in the background
    and never fail the run.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        engineer_repository: EngineerRepository,
        calendar_repository: CalendarRepository,
        notification_gateway: NotificationGateway,
        capacity_ceiling: int = DEFAULT_CAPACITY_CEILING,
        min_score: float = DEFAULT_MIN_SCORE,
        lookback_days: int = 30,
        lookahead_days: int = 7,
        run_time_limit_seconds: float | None = 600.0,
        today: Callable[[], date] = date.today,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._task_repository = task_repository
        self._engineer_repository = engineer_repository
        self._calendar_repository = calendar_repository
        self._notification_gateway = notification_gateway
        self.capacity_ceiling = capacity_ceiling
        self.lookback_days = lookback_days
        self.lookahead_days = lookahead_days
        self.run_time_limit_seconds = run_time_limit_seconds
        self.scorer = AssignmentScorer(capacity_ceiling, min_score)
        self._today = today
        self._clock = clock

    async def run_once(self, reference_date: date | None = None) -> AssignmentRunSummary:
        """
        Assign open, unassigned tasks for a reference date.

        Args:
            reference_date: Day the run plans for, defaults to today

        Returns:
            Summary of the run. Load and configuration failures produce an
            ABORTED summary rather than an exception.
        """
        ref = reference_date or self._today()
        started = self._clock()
        summary = AssignmentRunSummary(run_date=ref)
        logger.info("Starting daily task assignment", run_date=ref.isoformat())

        try:
            engineers, availability, tasks, initial_loads, rollover_date = await self._load(
                ref
            )
        except (RepositoryError, ConfigurationError, ConstraintViolationError) as e:
            logger.error(
                "Assignment run aborted while loading data",
                run_date=ref.isoformat(),
                error=e.message,
            )
            summary.outcome = RunOutcome.ABORTED
            summary.errors.append(e.message)
            log_run_summary(summary)
            return summary

        tracker = WorkloadTracker(self.capacity_ceiling, initial_loads)
        summary.candidate_tasks = len(tasks)
        summary.available_engineers = len(availability.available_engineers(engineers, ref))

        if not tasks:
            logger.info("No unassigned tasks to assign", run_date=ref.isoformat())
            log_run_summary(summary)
            return summary

        pending: list[asyncio.Task[None]] = []
        ordered = sorted(tasks, key=lambda t: task_sort_key(t, ref))

        for index, task in enumerate(ordered):
            if self._time_exceeded(started):
                summary.deferred = len(ordered) - index
                logger.warning(
                    "Run time limit reached, deferring remaining tasks",
                    deferred=summary.deferred,
                )
                break
            decision = await self._assign_task(
                task, ref, rollover_date, engineers, availability, tracker, summary
            )
            if decision is None:
                continue

            engineer = next(e for e in engineers if e.id == decision.engineer_id)
            pending.append(self._spawn(self._notify_assignee(engineer, decision)))

        for engineer_id, entry in summary.per_engineer.items():
            entry.final_load = tracker.current_load(engineer_id)

        summary.outcome = (
            RunOutcome.ASSIGNED if summary.assignments else RunOutcome.ALL_SKIPPED
        )

        await self._notify_managers(summary)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        log_run_summary(summary)
        return summary

    async def close(self) -> None:
        await self._notification_gateway.aclose()

    async def _load(
        self, ref: date
    ) -> tuple[
        list[Engineer], AvailabilityCalculator, list[Task], dict[UUID, int], date | None
    ]:
        """
        Read everything a run needs before any assignment is written.

        Raises:
            RepositoryError: If the store cannot be read
            ConfigurationError: If the store or gateway is not configured
            ConstraintViolationError: If overdue work has no work day to roll to
        """
        self._notification_gateway.ensure_configured()
        window_start = ref - timedelta(days=self.lookback_days)
        window_end = ref + timedelta(days=self.lookahead_days)
        # Overdue tasks may roll forward past the window end
        calendar_end = max(window_end, ref + timedelta(days=MAX_WORK_DAY_SEARCH))

        engineers = await self._engineer_repository.get_eligible()
        holidays = await self._calendar_repository.get_holidays(ref, calendar_end)
        leave = await self._calendar_repository.get_approved_leave(ref, calendar_end)
        initial_loads = await self._task_repository.count_open_load_by_assignee(ref)
        tasks = await self._task_repository.find_unassigned_open(window_start, window_end)

        eligible = sorted(
            (e for e in engineers if e.is_eligible), key=lambda e: (e.name, str(e.id))
        )
        calendar = WorkCalendar.from_holidays(holidays)
        # Every overdue task rolls forward to the same day
        rollover_date = (
            calendar.next_work_day(ref) if any(t.is_overdue(ref) for t in tasks) else None
        )
        availability = AvailabilityCalculator(calendar, leave)
        return eligible, availability, tasks, initial_loads, rollover_date

    def _time_exceeded(self, started: float) -> bool:
        if self.run_time_limit_seconds is None:
            return False
        return self._clock() - started > self.run_time_limit_seconds

    async def _assign_task(
        self,
        task: Task,
        ref: date,
        rollover_date: date | None,
        engineers: list[Engineer],
        availability: AvailabilityCalculator,
        tracker: WorkloadTracker,
        summary: AssignmentRunSummary,
    ) -> AssignmentDecision | None:
        overdue = task.is_overdue(ref)
        calendar = availability.calendar
        if overdue:
            effective_date = rollover_date
        elif calendar.is_non_work_day(task.due_date):
            logger.info(
                "Skipping task due on non-work day",
                task_id=str(task.id),
                due_date=task.due_date.isoformat(),
            )
            summary.skipped_non_work_day += 1
            return None
        else:
            effective_date = task.due_date

        candidates = [
            (e, tracker.current_load(e.id))
            for e in engineers
            if availability.is_available(e.id, effective_date) and tracker.has_capacity(e.id)
        ]
        best = self.scorer.select_best(task, candidates)
        if best is None:
            logger.info(
                "No available engineers for task",
                task_id=str(task.id),
                effective_date=effective_date.isoformat(),
                due_date=task.due_date.isoformat(),
            )
            summary.skipped_no_availability += 1
            return None

        engineer, score = best
        if not score.is_assignable:
            logger.info(
                "Best candidate below minimum score",
                task_id=str(task.id),
                engineer_id=str(engineer.id),
                score=round(score.total, 3),
            )
            summary.skipped_below_threshold += 1
            return None

        note = assignment_note(score, overdue)
        try:
            await self._task_repository.assign(task.id, engineer.id, note)
        except RepositoryError as e:
            logger.error(
                "Failed to write assignment",
                task_id=str(task.id),
                engineer_id=str(engineer.id),
                error=e.message,
            )
            summary.write_failures.append(
                AssignmentFailure(task_id=task.id, error=e.message)
            )
            return None

        task.assign(engineer.id, note, effective_date, score.total)
        publish_events(task.get_domain_events())
        task.clear_domain_events()
        tracker.increment(engineer.id)
        decision = AssignmentDecision(
            task_id=task.id,
            task_reference=task.reference,
            engineer_id=engineer.id,
            engineer_name=engineer.name,
            effective_date=effective_date,
            overdue=overdue,
            score=score,
            note=note,
        )
        summary.assignments.append(decision)
        entry = summary.per_engineer.setdefault(
            engineer.id,
            EngineerAssignmentSummary(engineer_id=engineer.id, name=engineer.name),
        )
        entry.count += 1
        entry.task_ids.append(task.id)

        logger.info(
            "Assigned task",
            task_id=str(task.id),
            task_reference=task.reference,
            engineer=engineer.name,
            overdue=overdue,
            score=round(score.total, 2),
        )
        return decision

    @staticmethod
    def _spawn(coro: Coroutine[Any, Any, None]) -> "asyncio.Task[None]":
        return asyncio.create_task(coro)

    async def _send(self, notification: Notification) -> None:
        try:
            await self._notification_gateway.send(notification)
        except Exception as e:
            NOTIFICATION_FAILURES.labels(notification_type=notification.type.value).inc()
            logger.warning(
                "Notification delivery failed",
                notification_type=notification.type.value,
                recipient=notification.recipient_email,
                error=str(e),
            )

    async def _notify_assignee(
        self, engineer: Engineer, decision: AssignmentDecision
    ) -> None:
        await self._send(
            Notification(
                type=NotificationType.TASK_ASSIGNED,
                recipient_id=engineer.id,
                recipient_email=engineer.email,
                task_id=decision.task_id,
                title=ASSIGNED_TITLE,
                message=(
                    "You have been automatically assigned a new task based on "
                    f"your skills and availability. {decision.note}"
                ),
                priority=NotificationPriority.MEDIUM,
            )
        )

    async def _notify_managers(self, summary: AssignmentRunSummary) -> None:
        try:
            managers = await self._engineer_repository.get_managers()
        except RepositoryError as e:
            logger.warning("Could not load managers for run summary", error=e.message)
            return

        message = (
            f"Automated task assignment completed: {summary.assigned_count} tasks "
            f"assigned to {len(summary.per_engineer)} engineers. "
            "Workload optimized based on skills and availability."
        )
        for manager in managers:
            await self._send(
                Notification(
                    type=NotificationType.GENERAL,
                    recipient_email=manager.email,
                    title=SUMMARY_TITLE,
                    message=message,
                    priority=NotificationPriority.LOW,
                )
            )
