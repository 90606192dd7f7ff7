from .calendar_repository import CalendarRepository
from .engineer_repository import EngineerRepository
from .notification_gateway import NotificationGateway
from .parts_request_repository import PartsRequestRepository
from .task_repository import TaskRepository

__all__ = [
    "CalendarRepository",
    "EngineerRepository",
    "NotificationGateway",
    "PartsRequestRepository",
    "TaskRepository",
]
