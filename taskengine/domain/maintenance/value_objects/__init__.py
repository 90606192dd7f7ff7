from .calendar import Holiday, LeaveRequest, WorkCalendar
from .common import AssetInfo, Notification
from .enums import (
    LeaveStatus,
    NotificationPriority,
    NotificationType,
    PartsRequestStatus,
    TaskPriority,
    TaskStatus,
    Urgency,
)

__all__ = [
    "AssetInfo",
    "Holiday",
    "LeaveRequest",
    "LeaveStatus",
    "Notification",
    "NotificationPriority",
    "NotificationType",
    "PartsRequestStatus",
    "TaskPriority",
    "TaskStatus",
    "Urgency",
    "WorkCalendar",
]
