import pytest

from taskengine.domain.maintenance.events import DomainEventHandler, get_event_dispatcher
from taskengine.tests.factories import REFERENCE_DATE
from taskengine.tests.utils.in_memory import (
    InMemoryCalendarRepository,
    InMemoryEngineerRepository,
    InMemoryPartsRequestRepository,
    InMemoryTaskRepository,
    RecordingNotificationGateway,
)


class RecordingEventHandler(DomainEventHandler):
    def __init__(self):
        self.events = []

    def handle(self, event) -> None:
        self.events.append(event)


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def engineer_repository():
    return InMemoryEngineerRepository()


@pytest.fixture
def calendar_repository():
    return InMemoryCalendarRepository()


@pytest.fixture
def parts_request_repository():
    return InMemoryPartsRequestRepository()


@pytest.fixture
def notification_gateway():
    return RecordingNotificationGateway()


@pytest.fixture
def recorded_events():
    """Capture domain events published through the global dispatcher."""
    handler = RecordingEventHandler()
    dispatcher = get_event_dispatcher()
    dispatcher.register_handler(handler)
    yield handler.events
    dispatcher.unregister_handler(handler)


@pytest.fixture
def unconfigured_settings(monkeypatch):
    """Blank out store and notification settings for the real service wiring."""
    from taskengine.core.config import settings
    from taskengine.infrastructure.service_dependencies import get_task_repository
    from taskengine.infrastructure.supabase import get_supabase_client

    for name in ("SUPABASE_URL", "SUPABASE_SERVICE_KEY", "SUPABASE_SECRET", "NOTIFICATIONS_ENDPOINT"):
        monkeypatch.setattr(settings, name, None)
    get_supabase_client.cache_clear()
    get_task_repository.cache_clear()
    yield settings
    get_supabase_client.cache_clear()
    get_task_repository.cache_clear()
