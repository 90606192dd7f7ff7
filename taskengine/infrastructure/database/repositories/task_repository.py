"""Supabase implementation of the TaskRepository interface."""

from collections import Counter
from datetime import date
from uuid import UUID

from ....domain.maintenance.entities import Task
from ....domain.maintenance.repositories import TaskRepository
from ....domain.maintenance.value_objects import TaskStatus
from ....domain.shared.base import utcnow
from ..mappers import TASK_SELECT, task_from_row, task_to_row
from .base import SupabaseRepository


class SupabaseTaskRepository(SupabaseRepository, TaskRepository):
    """Tasks stored in the ``tasks`` table, joined to ``assets`` for types."""

    table_name = "tasks"

    async def get_by_id(self, task_id: UUID) -> Task | None:
        rows = self._execute(
            "get_task",
            self.table().select(TASK_SELECT).eq("id", str(task_id)).limit(1),
        )
        tasks = self._map("get_task", task_from_row, rows)
        return tasks[0] if tasks else None

    async def find_unassigned_open(self, start: date, end: date) -> list[Task]:
        rows = self._execute(
            "find_unassigned_open",
            self.table()
            .select(TASK_SELECT)
            .is_("assigned_to", "null")
            .eq("status", TaskStatus.OPEN.value)
            .gte("due_date", start.isoformat())
            .lte("due_date", end.isoformat()),
        )
        return self._map("find_unassigned_open", task_from_row, rows)

    async def count_open_load_by_assignee(self, on_date: date) -> dict[UUID, int]:
        rows = self._execute(
            "count_open_load",
            self.table()
            .select("assigned_to")
            .neq("status", TaskStatus.COMPLETED.value)
            .eq("due_date", on_date.isoformat()),
        )
        counts = Counter(row["assigned_to"] for row in rows if row.get("assigned_to"))
        return {UUID(engineer_id): count for engineer_id, count in counts.items()}

    async def assign(self, task_id: UUID, engineer_id: UUID, notes: str) -> None:
        self._execute(
            "assign_task",
            self.table()
            .update(
                {
                    "assigned_to": str(engineer_id),
                    "notes": notes,
                    "updated_at": utcnow().isoformat(),
                }
            )
            .eq("id", str(task_id)),
        )

    async def create(self, task: Task) -> Task:
        row = task_to_row(task)
        row["created_at"] = task.created_at.isoformat()
        self._execute("create_task", self.table().insert(row))
        return task

    async def save(self, task: Task) -> Task:
        row = task_to_row(task)
        row.pop("id")
        self._execute("save_task", self.table().update(row).eq("id", str(task.id)))
        return task
