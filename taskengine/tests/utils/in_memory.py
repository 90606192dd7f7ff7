"""
In-memory repositories and a recording notification gateway.

Stored entities are copied on the way in and out so services cannot mutate
repository state without calling save.
"""

from datetime import date
from uuid import UUID

from taskengine.domain.maintenance.entities import Engineer, PartsRequest, Task
from taskengine.domain.maintenance.repositories import (
    CalendarRepository,
    EngineerRepository,
    NotificationGateway,
    PartsRequestRepository,
    TaskRepository,
)
from taskengine.domain.maintenance.value_objects import (
    Holiday,
    LeaveRequest,
    Notification,
    NotificationType,
    TaskStatus,
)
from taskengine.domain.shared.exceptions import (
    NotificationDeliveryError,
    RepositoryError,
)


class InMemoryTaskRepository(TaskRepository):
    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: dict[UUID, Task] = {}
        self.failing_assignments: set[UUID] = set()
        self.fail_reads = False
        self.assign_calls: list[tuple[UUID, UUID, str]] = []
        for task in tasks or []:
            self.add(task)

    def add(self, task: Task) -> None:
        stored = task.model_copy(deep=True)
        stored.clear_domain_events()
        self.tasks[task.id] = stored

    def stored(self, task_id: UUID) -> Task:
        return self.tasks[task_id]

    async def get_by_id(self, task_id: UUID) -> Task | None:
        task = self.tasks.get(task_id)
        return task.model_copy(deep=True) if task else None

    async def find_unassigned_open(self, start: date, end: date) -> list[Task]:
        if self.fail_reads:
            raise RepositoryError("find_unassigned_open", "connection refused")
        return [
            t.model_copy(deep=True)
            for t in self.tasks.values()
            if t.status == TaskStatus.OPEN
            and t.assigned_to is None
            and start <= t.due_date <= end
        ]

    async def count_open_load_by_assignee(self, on_date: date) -> dict[UUID, int]:
        loads: dict[UUID, int] = {}
        for t in self.tasks.values():
            if t.assigned_to and t.status != TaskStatus.COMPLETED and t.due_date == on_date:
                loads[t.assigned_to] = loads.get(t.assigned_to, 0) + 1
        return loads

    async def assign(self, task_id: UUID, engineer_id: UUID, notes: str) -> None:
        if task_id in self.failing_assignments:
            raise RepositoryError("assign_task", "write rejected")
        self.assign_calls.append((task_id, engineer_id, notes))
        task = self.tasks[task_id]
        task.assigned_to = engineer_id
        task.notes = notes

    async def create(self, task: Task) -> Task:
        self.add(task)
        return task

    async def save(self, task: Task) -> Task:
        self.add(task)
        return task


class InMemoryEngineerRepository(EngineerRepository):
    def __init__(self, engineers: list[Engineer] | None = None):
        self.engineers = list(engineers or [])
        self.fail_reads = False
        self.fail_managers = False

    async def get_by_id(self, engineer_id: UUID) -> Engineer | None:
        return next((e for e in self.engineers if e.id == engineer_id), None)

    async def get_eligible(self) -> list[Engineer]:
        if self.fail_reads:
            raise RepositoryError("get_eligible_engineers", "connection refused")
        return [e for e in self.engineers if e.is_eligible]

    async def get_managers(self) -> list[Engineer]:
        if self.fail_managers:
            raise RepositoryError("get_managers", "connection refused")
        return [e for e in self.engineers if e.is_manager]


class InMemoryCalendarRepository(CalendarRepository):
    def __init__(
        self,
        holidays: list[Holiday] | None = None,
        leave: list[LeaveRequest] | None = None,
    ):
        self.holidays = list(holidays or [])
        self.leave = list(leave or [])

    async def get_holidays(self, start: date, end: date) -> list[Holiday]:
        return [h for h in self.holidays if start <= h.holiday_date <= end]

    async def get_approved_leave(self, start: date, end: date) -> list[LeaveRequest]:
        return [
            lr
            for lr in self.leave
            if lr.is_approved and lr.start_date <= end and lr.end_date >= start
        ]


class InMemoryPartsRequestRepository(PartsRequestRepository):
    def __init__(self, requests: list[PartsRequest] | None = None):
        self.requests: dict[UUID, PartsRequest] = {
            r.id: r.model_copy(deep=True) for r in requests or []
        }

    async def get_by_id(self, parts_request_id: UUID) -> PartsRequest | None:
        request = self.requests.get(parts_request_id)
        return request.model_copy(deep=True) if request else None

    async def save(self, parts_request: PartsRequest) -> PartsRequest:
        stored = parts_request.model_copy(deep=True)
        stored.clear_domain_events()
        self.requests[parts_request.id] = stored
        return parts_request


class RecordingNotificationGateway(NotificationGateway):
    def __init__(self, failing_types: set[NotificationType] | None = None):
        self.sent: list[Notification] = []
        self.failing_types = failing_types or set()
        self.closed = False

    async def send(self, notification: Notification) -> None:
        if notification.type in self.failing_types:
            raise NotificationDeliveryError("endpoint unavailable", status_code=503)
        self.sent.append(notification)

    async def aclose(self) -> None:
        self.closed = True

    def of_type(self, notification_type: NotificationType) -> list[Notification]:
        return [n for n in self.sent if n.type == notification_type]
