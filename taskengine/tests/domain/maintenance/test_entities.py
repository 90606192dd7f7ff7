"""Unit tests for Task, Engineer and PartsRequest entities."""

from datetime import date
from uuid import uuid4

import pytest

from taskengine.domain.maintenance.entities import CORRECTIVE_MAINTENANCE
from taskengine.domain.maintenance.events import TaskAssigned, TaskStatusChanged
from taskengine.domain.maintenance.value_objects import PartsRequestStatus, TaskStatus
from taskengine.domain.shared.exceptions import (
    BusinessRuleError,
    InvalidStatusTransitionError,
)
from taskengine.tests.factories import EngineerFactory, PartsRequestFactory, TaskFactory


class TestTask:
    def test_transition_records_event_and_note(self):
        task = TaskFactory.create()

        task.transition_to(TaskStatus.ON_HOLD, reason="Access refused")

        assert task.status == TaskStatus.ON_HOLD
        assert task.notes == "Access refused"
        events = task.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], TaskStatusChanged)
        assert events[0].old_status == TaskStatus.OPEN

    def test_completion_stamps_date(self):
        task = TaskFactory.create(status=TaskStatus.IN_PROGRESS)

        task.transition_to(TaskStatus.COMPLETED, completed_on=date(2024, 3, 5))

        assert task.date_completed == date(2024, 3, 5)
        assert task.is_valid()

    def test_completion_requires_date(self):
        task = TaskFactory.create(status=TaskStatus.IN_PROGRESS)

        with pytest.raises(BusinessRuleError):
            task.transition_to(TaskStatus.COMPLETED)

    def test_illegal_transition_leaves_task_unchanged(self):
        task = TaskFactory.create()

        with pytest.raises(InvalidStatusTransitionError):
            task.transition_to(TaskStatus.COMPLETED, completed_on=date(2024, 3, 5))

        assert task.status == TaskStatus.OPEN
        assert task.get_domain_events() == []

    def test_assign_records_note_and_event(self):
        task = TaskFactory.create()
        engineer_id = uuid4()

        task.assign(engineer_id, "Auto-assigned: 100% skill match", date(2024, 3, 4), 0.9)

        assert task.assigned_to == engineer_id
        assert task.notes == "Auto-assigned: 100% skill match"
        [event] = task.get_domain_events()
        assert isinstance(event, TaskAssigned)
        assert event.engineer_id == engineer_id
        assert event.effective_date == date(2024, 3, 4)

    def test_completed_task_cannot_be_assigned(self):
        task = TaskFactory.create(status=TaskStatus.COMPLETED, date_completed=date(2024, 3, 1))

        with pytest.raises(BusinessRuleError):
            task.assign(uuid4(), "note", date(2024, 3, 4), 0.9)

    def test_unknown_priority_label_becomes_low(self):
        task = TaskFactory.create(priority="Routine")

        assert task.priority.weight == 1

    def test_overdue_is_strictly_before_reference(self):
        task = TaskFactory.create(due_date=date(2024, 3, 4))

        assert not task.is_overdue(date(2024, 3, 4))
        assert task.is_overdue(date(2024, 3, 5))


class TestEngineer:
    def test_blank_skills_are_discarded(self):
        engineer = EngineerFactory.create(skills=["HVAC", "", "   ", " Plumbing "])

        assert engineer.skills == ["HVAC", "Plumbing"]

    def test_viewer_is_not_eligible(self):
        assert not EngineerFactory.create(role="Viewer").is_eligible
        assert EngineerFactory.create(role="Engineer").is_eligible

    @pytest.mark.parametrize("role", ["Admin", "Access All", "Manager"])
    def test_manager_roles(self, role):
        assert EngineerFactory.create(role=role).is_manager


class TestPartsRequest:
    def test_received_then_installed(self):
        request = PartsRequestFactory.create(task_id=uuid4())

        request.mark_received(date(2024, 3, 4))
        request.mark_installed(date(2024, 3, 5))

        assert request.status == PartsRequestStatus.INSTALLED
        assert request.received_date == date(2024, 3, 4)
        assert request.installed_date == date(2024, 3, 5)

    def test_cannot_install_before_receipt(self):
        request = PartsRequestFactory.create(task_id=uuid4())

        with pytest.raises(InvalidStatusTransitionError):
            request.mark_installed(date(2024, 3, 5))

    def test_corrective_link_is_immutable(self):
        request = PartsRequestFactory.create(task_id=uuid4())
        first = TaskFactory.create(task_type=CORRECTIVE_MAINTENANCE)
        request.link_corrective_task(first)

        request.link_corrective_task(first)
        with pytest.raises(BusinessRuleError):
            request.link_corrective_task(TaskFactory.create(task_type=CORRECTIVE_MAINTENANCE))
        assert request.corrective_task_id == first.id

    def test_only_corrective_tasks_can_be_linked(self):
        request = PartsRequestFactory.create(task_id=uuid4())

        with pytest.raises(BusinessRuleError):
            request.link_corrective_task(TaskFactory.create(task_type="PPM"))
        assert request.corrective_task_id is None

    def test_description_includes_part_number_when_known(self):
        with_number = PartsRequestFactory.create(task_id=uuid4())
        without = PartsRequestFactory.create(task_id=uuid4(), part_number=None)

        assert with_number.description == "2x Pump seal (PS-42)"
        assert without.description == "2x Pump seal"
