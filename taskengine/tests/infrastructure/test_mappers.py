"""Unit tests for Supabase row mapping."""

from datetime import date
from uuid import uuid4

from taskengine.domain.maintenance.value_objects import (
    LeaveStatus,
    PartsRequestStatus,
    TaskPriority,
    TaskStatus,
    Urgency,
)
from taskengine.infrastructure.database.mappers import (
    engineer_from_row,
    holiday_from_row,
    leave_from_row,
    parts_request_from_row,
    parts_request_to_row,
    task_from_row,
    task_to_row,
)


def task_row(**overrides):
    row = {
        "id": str(uuid4()),
        "task_id": "T-100",
        "plant_room_id": str(uuid4()),
        "asset_id": str(uuid4()),
        "assigned_to": None,
        "due_date": "2024-03-04",
        "type_of_task": "PPM",
        "status": "Open",
        "priority": "High",
        "notes": None,
        "date_completed": None,
        "created_at": "2024-02-01T09:00:00Z",
        "updated_at": "2024-02-01T09:00:00+00:00",
        "assets": {"Asset Name": "Boiler 1", "Asset Type": "Gas Boiler"},
    }
    row.update(overrides)
    return row


class TestTaskMapping:
    def test_row_to_task(self):
        row = task_row()

        task = task_from_row(row)

        assert str(task.id) == row["id"]
        assert task.reference == "T-100"
        assert task.due_date == date(2024, 3, 4)
        assert task.status == TaskStatus.OPEN
        assert task.priority == TaskPriority.HIGH
        assert task.asset_type == "Gas Boiler"

    def test_missing_asset_join(self):
        task = task_from_row(task_row(assets=None, asset_id=None))

        assert task.asset is None
        assert task.asset_id is None

    def test_unknown_priority_maps_to_low(self):
        assert task_from_row(task_row(priority="ASAP")).priority == TaskPriority.LOW

    def test_task_round_trips_columns(self):
        task = task_from_row(task_row(assigned_to=str(uuid4())))

        row = task_to_row(task)

        assert row["task_id"] == "T-100"
        assert row["assigned_to"] == str(task.assigned_to)
        assert row["status"] == "Open"
        assert row["type_of_task"] == "PPM"
        assert "assets" not in row


class TestOtherMappings:
    def test_team_row(self):
        engineer = engineer_from_row(
            {
                "id": str(uuid4()),
                "Engineer ID": "ENG-7",
                "Name": "Sam Patel",
                "Email": "sam@example.com",
                "Role": "Engineer",
                "Skills": ["HVAC", ""],
            }
        )

        assert engineer.engineer_ref == "ENG-7"
        assert engineer.skills == ["HVAC"]

    def test_team_row_without_skills(self):
        engineer = engineer_from_row(
            {"id": str(uuid4()), "Name": "Jo Reid", "Role": "Viewer", "Skills": None}
        )

        assert engineer.skills == []
        assert not engineer.is_eligible

    def test_holiday_and_leave_rows(self):
        holiday = holiday_from_row({"date": "2024-12-25", "name": "Christmas", "type": "bank"})
        leave = leave_from_row(
            {
                "engineer_id": str(uuid4()),
                "start_date": "2024-03-04",
                "end_date": "2024-03-08",
                "status": "approved",
            }
        )

        assert holiday.holiday_date == date(2024, 12, 25)
        assert leave.status == LeaveStatus.APPROVED
        assert leave.covers(date(2024, 3, 6))

    def test_parts_request_row(self):
        corrective_id = uuid4()
        request = parts_request_from_row(
            {
                "id": str(uuid4()),
                "parts_request_id": "PR-9",
                "task_id": str(uuid4()),
                "part_name": "Gasket",
                "quantity": 3,
                "urgency": "Critical",
                "status": "Received",
                "received_date": "2024-03-04",
                "corrective_task_id": str(corrective_id),
            }
        )

        assert request.urgency == Urgency.CRITICAL
        assert request.status == PartsRequestStatus.RECEIVED
        assert request.corrective_task_id == corrective_id
        row = parts_request_to_row(request)
        assert row["corrective_task_id"] == str(corrective_id)
        assert row["received_date"] == "2024-03-04"
