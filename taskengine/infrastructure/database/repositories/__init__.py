from .calendar_repository import SupabaseCalendarRepository
from .engineer_repository import SupabaseEngineerRepository
from .parts_request_repository import SupabasePartsRequestRepository
from .task_repository import SupabaseTaskRepository

__all__ = [
    "SupabaseCalendarRepository",
    "SupabaseEngineerRepository",
    "SupabasePartsRequestRepository",
    "SupabaseTaskRepository",
]
