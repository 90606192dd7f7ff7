"""Tests for PartsFulfillmentService."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from taskengine.domain.maintenance.services import (
    PartsFulfillmentService,
    TaskLifecycleService,
)
from taskengine.domain.maintenance.value_objects import (
    PartsRequestStatus,
    TaskPriority,
    TaskStatus,
    Urgency,
)
from taskengine.domain.shared.exceptions import (
    InvalidStatusTransitionError,
    PartsRequestNotFoundError,
    TaskNotFoundError,
)
from taskengine.tests.factories import PartsRequestFactory, TaskFactory

TODAY = date(2024, 3, 4)


@pytest.fixture
def service(parts_request_repository, task_repository):
    lifecycle = TaskLifecycleService(
        task_repository, today=lambda: TODAY, epoch_seconds=lambda: 1_700_000_000.0
    )
    return PartsFulfillmentService(
        parts_request_repository, task_repository, lifecycle, today=lambda: TODAY
    )


@pytest.fixture
def awaiting_task(task_repository):
    task = TaskFactory.create(
        reference="T-100", status=TaskStatus.AWAITING_PARTS, assigned_to=uuid4()
    )
    task_repository.add(task)
    return task


def add_request(repository, **kwargs):
    request = PartsRequestFactory.create(**kwargs)
    repository.requests[request.id] = request
    return request


class TestMarkOrdered:
    @pytest.mark.asyncio
    async def test_sets_order_date(self, service, parts_request_repository, awaiting_task):
        request = add_request(
            parts_request_repository,
            task_id=awaiting_task.id,
            status=PartsRequestStatus.REQUESTED,
        )

        ordered = await service.mark_ordered(request.id)

        assert ordered.status == PartsRequestStatus.ORDERED
        assert ordered.order_date == TODAY


class TestPartsReceived:
    @pytest.mark.asyncio
    async def test_creates_linked_corrective_task(
        self, service, parts_request_repository, task_repository, awaiting_task
    ):
        request = add_request(
            parts_request_repository, task_id=awaiting_task.id, urgency=Urgency.CRITICAL
        )

        corrective = await service.handle_parts_received(request.id)

        stored_request = parts_request_repository.requests[request.id]
        assert stored_request.status == PartsRequestStatus.RECEIVED
        assert stored_request.received_date == TODAY
        assert stored_request.corrective_task_id == corrective.id
        assert corrective.assigned_to == awaiting_task.assigned_to
        assert corrective.due_date == TODAY + timedelta(days=1)
        assert corrective.priority == TaskPriority.HIGH
        assert corrective.notes == (
            "Parts received: Pump seal. Complete installation and return equipment "
            "to service.. Original task: T-100. Received parts: 2x Pump seal (PS-42)"
        )

        original = task_repository.stored(awaiting_task.id)
        assert original.status == TaskStatus.IN_PROGRESS
        assert original.notes == (
            f"Parts received. Corrective task created: {corrective.reference}"
        )

    @pytest.mark.asyncio
    async def test_non_critical_due_in_two_days(
        self, service, parts_request_repository, awaiting_task
    ):
        request = add_request(
            parts_request_repository, task_id=awaiting_task.id, urgency=Urgency.LOW
        )

        corrective = await service.handle_parts_received(request.id)

        assert corrective.due_date == TODAY + timedelta(days=2)
        assert corrective.priority == TaskPriority.LOW

    @pytest.mark.asyncio
    async def test_in_progress_original_only_gets_note(
        self, service, parts_request_repository, task_repository
    ):
        task = TaskFactory.create(status=TaskStatus.IN_PROGRESS)
        task_repository.add(task)
        request = add_request(parts_request_repository, task_id=task.id)

        corrective = await service.handle_parts_received(request.id)

        original = task_repository.stored(task.id)
        assert original.status == TaskStatus.IN_PROGRESS
        assert corrective.reference in original.notes

    @pytest.mark.asyncio
    async def test_completed_original_left_alone(
        self, service, parts_request_repository, task_repository
    ):
        task = TaskFactory.create(
            status=TaskStatus.COMPLETED, date_completed=TODAY, notes="Closed"
        )
        task_repository.add(task)
        request = add_request(parts_request_repository, task_id=task.id)

        await service.handle_parts_received(request.id)

        original = task_repository.stored(task.id)
        assert original.status == TaskStatus.COMPLETED
        assert original.notes == "Closed"

    @pytest.mark.asyncio
    async def test_missing_original_task_leaves_request_received(
        self, service, parts_request_repository
    ):
        request = add_request(parts_request_repository, task_id=uuid4())

        with pytest.raises(TaskNotFoundError):
            await service.handle_parts_received(request.id)

        stored = parts_request_repository.requests[request.id]
        assert stored.status == PartsRequestStatus.RECEIVED
        assert stored.corrective_task_id is None

    @pytest.mark.asyncio
    async def test_unknown_request(self, service):
        with pytest.raises(PartsRequestNotFoundError):
            await service.handle_parts_received(uuid4())


class TestPartsInstalled:
    @pytest.mark.asyncio
    async def test_completes_corrective_task(
        self, service, parts_request_repository, task_repository, awaiting_task
    ):
        request = add_request(parts_request_repository, task_id=awaiting_task.id)
        corrective = await service.handle_parts_received(request.id)

        installed = await service.handle_parts_installed(request.id)

        assert installed.status == PartsRequestStatus.INSTALLED
        assert installed.installed_date == TODAY
        stored = task_repository.stored(corrective.id)
        assert stored.status == TaskStatus.COMPLETED
        assert stored.date_completed == TODAY
        assert stored.notes == "Parts installation completed: Pump seal"

    @pytest.mark.asyncio
    async def test_without_linked_task(self, service, parts_request_repository):
        request = add_request(
            parts_request_repository,
            task_id=uuid4(),
            status=PartsRequestStatus.RECEIVED,
        )

        installed = await service.handle_parts_installed(request.id)

        assert installed.status == PartsRequestStatus.INSTALLED

    @pytest.mark.asyncio
    async def test_cannot_install_unreceived_parts(self, service, parts_request_repository):
        request = add_request(parts_request_repository, task_id=uuid4())

        with pytest.raises(InvalidStatusTransitionError):
            await service.handle_parts_installed(request.id)
