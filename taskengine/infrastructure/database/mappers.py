"""
Row <-> entity mapping for the Supabase tables.

Column names follow the existing schema, including the quoted, capitalised
team columns ("Name", "Skills", ...).
"""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from ...domain.maintenance.entities import Engineer, PartsRequest, Task
from ...domain.maintenance.value_objects import (
    AssetInfo,
    Holiday,
    LeaveRequest,
    LeaveStatus,
    TaskPriority,
    TaskStatus,
)

Row = dict[str, Any]

TASK_SELECT = '*, assets("Asset Name", "Asset Type")'


def _date(value: str | date | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def _timestamps(row: Row) -> dict[str, datetime]:
    stamps = {}
    for key in ("created_at", "updated_at"):
        if row.get(key):
            stamps[key] = datetime.fromisoformat(str(row[key]).replace("Z", "+00:00"))
    return stamps


def _uuid(value: str | None) -> UUID | None:
    return UUID(value) if value else None


def task_from_row(row: Row) -> Task:
    asset = row.get("assets")
    return Task(
        id=UUID(row["id"]),
        reference=row.get("task_id") or row["id"],
        location_id=UUID(row["plant_room_id"]),
        asset_id=_uuid(row.get("asset_id")),
        asset=(
            AssetInfo(name=asset.get("Asset Name"), asset_type=asset.get("Asset Type"))
            if asset
            else None
        ),
        assigned_to=_uuid(row.get("assigned_to")),
        due_date=_date(row["due_date"]),
        task_type=row.get("type_of_task") or "PPM",
        status=TaskStatus(row["status"]),
        priority=TaskPriority.parse(row.get("priority")),
        notes=row.get("notes"),
        date_completed=_date(row.get("date_completed")),
        **_timestamps(row),
    )


def task_to_row(task: Task) -> Row:
    return {
        "id": str(task.id),
        "task_id": task.reference,
        "plant_room_id": str(task.location_id),
        "asset_id": str(task.asset_id) if task.asset_id else None,
        "assigned_to": str(task.assigned_to) if task.assigned_to else None,
        "due_date": task.due_date.isoformat(),
        "type_of_task": task.task_type,
        "status": task.status.value,
        "priority": task.priority.value,
        "notes": task.notes,
        "date_completed": task.date_completed.isoformat() if task.date_completed else None,
        "updated_at": task.updated_at.isoformat(),
    }


def engineer_from_row(row: Row) -> Engineer:
    return Engineer(
        id=UUID(row["id"]),
        engineer_ref=row.get("Engineer ID"),
        name=row["Name"],
        email=row.get("Email"),
        role=row["Role"],
        skills=row.get("Skills") or [],
        **_timestamps(row),
    )


def holiday_from_row(row: Row) -> Holiday:
    return Holiday(
        holiday_date=_date(row["date"]),
        name=row.get("name") or "",
        holiday_type=row.get("type"),
    )


def leave_from_row(row: Row) -> LeaveRequest:
    return LeaveRequest(
        engineer_id=UUID(row["engineer_id"]),
        start_date=_date(row["start_date"]),
        end_date=_date(row["end_date"]),
        status=LeaveStatus(row.get("status") or LeaveStatus.APPROVED.value),
    )


def parts_request_from_row(row: Row) -> PartsRequest:
    return PartsRequest(
        id=UUID(row["id"]),
        reference=row.get("parts_request_id") or row["id"],
        task_id=UUID(row["task_id"]),
        asset_id=_uuid(row.get("asset_id")),
        part_name=row["part_name"],
        part_number=row.get("part_number"),
        quantity=row.get("quantity") or 1,
        urgency=row.get("urgency") or "Medium",
        status=row["status"],
        order_date=_date(row.get("order_date")),
        received_date=_date(row.get("received_date")),
        installed_date=_date(row.get("installed_date")),
        notes=row.get("notes"),
        corrective_task_id=_uuid(row.get("corrective_task_id")),
        **_timestamps(row),
    )


def parts_request_to_row(request: PartsRequest) -> Row:
    return {
        "status": request.status.value,
        "order_date": request.order_date.isoformat() if request.order_date else None,
        "received_date": request.received_date.isoformat() if request.received_date else None,
        "installed_date": (
            request.installed_date.isoformat() if request.installed_date else None
        ),
        "notes": request.notes,
        "corrective_task_id": (
            str(request.corrective_task_id) if request.corrective_task_id else None
        ),
        "updated_at": request.updated_at.isoformat(),
    }
