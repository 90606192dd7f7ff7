"""Common value objects shared by tasks and notifications."""

from typing import Any
from uuid import UUID

from ...shared.base import ValueObject
from .enums import NotificationPriority, NotificationType


class AssetInfo(ValueObject):
    """The parts of an asset record the engine needs for skill matching."""

    name: str | None = None
    asset_type: str | None = None


class Notification(ValueObject):
    """A notification request handed to the delivery collaborator."""

    type: NotificationType
    title: str
    message: str
    recipient_id: UUID | None = None
    recipient_email: str | None = None
    task_id: UUID | None = None
    priority: NotificationPriority = NotificationPriority.MEDIUM

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body expected by the send-notifications function."""
        payload: dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "priority": self.priority.value,
        }
        if self.recipient_id is not None:
            payload["recipientId"] = str(self.recipient_id)
        if self.recipient_email:
            payload["recipientEmail"] = self.recipient_email
        if self.task_id is not None:
            payload["taskId"] = str(self.task_id)
        return payload
