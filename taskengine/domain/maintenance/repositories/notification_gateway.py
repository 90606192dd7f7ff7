"""
Notification Gateway Interface

Delivery of notifications is an outside concern; the domain only hands over
a Notification and expects an error on failure.
"""

from abc import ABC, abstractmethod

from ..value_objects.common import Notification


class NotificationGateway(ABC):
    """Abstract notification delivery contract."""

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        """
        Deliver a notification.

        Raises:
            NotificationDeliveryError: If delivery fails
        """
        pass

    def ensure_configured(self) -> None:
        """
        Check the gateway can deliver before a run starts.

        Raises:
            ConfigurationError: If required delivery settings are missing
        """
        return None

    async def aclose(self) -> None:
        """Release any resources held by the gateway."""
        return None
