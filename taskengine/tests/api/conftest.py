from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from taskengine.domain.maintenance.services import (
    DailyAssignmentOptimizer,
    PartsFulfillmentService,
    TaskLifecycleService,
)
from taskengine.infrastructure.service_dependencies import (
    get_optimizer,
    get_parts_fulfillment_service,
    get_task_lifecycle_service,
)
from taskengine.main import app
from taskengine.tests.factories import REFERENCE_DATE

EPOCH_SECONDS = 1_709_540_000.0


@pytest.fixture
def client(
    task_repository,
    engineer_repository,
    calendar_repository,
    parts_request_repository,
    notification_gateway,
) -> Generator[TestClient, None, None]:
    """Client whose services run over the in-memory repositories."""
    lifecycle = TaskLifecycleService(
        task_repository,
        today=lambda: REFERENCE_DATE,
        epoch_seconds=lambda: EPOCH_SECONDS,
    )
    app.dependency_overrides[get_optimizer] = lambda: DailyAssignmentOptimizer(
        task_repository,
        engineer_repository,
        calendar_repository,
        notification_gateway,
        today=lambda: REFERENCE_DATE,
    )
    app.dependency_overrides[get_task_lifecycle_service] = lambda: lifecycle
    app.dependency_overrides[get_parts_fulfillment_service] = (
        lambda: PartsFulfillmentService(
            parts_request_repository,
            task_repository,
            lifecycle,
            today=lambda: REFERENCE_DATE,
        )
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
