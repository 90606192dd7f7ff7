"""
HTTP notification gateway.

Posts notifications to the Supabase ``send-notifications`` edge function.
Transport failures are retried with exponential backoff; an HTTP error
response is not retried.
"""

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ...core.config import settings
from ...core.observability import get_logger
from ...domain.maintenance.repositories import NotificationGateway
from ...domain.maintenance.value_objects import Notification
from ...domain.shared.exceptions import ConfigurationError, NotificationDeliveryError

logger = get_logger(__name__)


class HttpNotificationGateway(NotificationGateway):
    """NotificationGateway backed by httpx.AsyncClient."""

    def __init__(
        self,
        url: str | None = None,
        service_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        max_attempts: int | None = None,
        min_wait: float = 0.5,
        max_wait: float = 5.0,
    ):
        self.url = url or settings.NOTIFICATIONS_URL
        self.service_key = service_key or settings.SUPABASE_SERVICE_KEY
        self._client = client or httpx.AsyncClient(
            timeout=timeout or settings.NOTIFICATION_TIMEOUT_SECONDS
        )
        self.max_attempts = max_attempts or settings.NOTIFICATION_MAX_ATTEMPTS
        self.min_wait = min_wait
        self.max_wait = max_wait

    def ensure_configured(self) -> None:
        if not self.url:
            raise ConfigurationError("NOTIFICATIONS_URL")
        if not self.service_key:
            raise ConfigurationError("SUPABASE_SERVICE_KEY")

    async def _post(self, payload: dict) -> httpx.Response:
        return await self._client.post(
            self.url,
            json=payload,
            headers={
                "Authorization": f"Bearer {self.service_key}",
                "Content-Type": "application/json",
            },
        )

    async def send(self, notification: Notification) -> None:
        self.ensure_configured()
        payload = notification.to_payload()
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=self.min_wait, max=self.max_wait),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self._post(payload)
        except httpx.TransportError as e:
            raise NotificationDeliveryError(
                f"Notification transport failed after {self.max_attempts} attempts: {e}"
            ) from e

        if response.is_error:
            raise NotificationDeliveryError(
                f"Notification endpoint returned {response.status_code}",
                status_code=response.status_code,
            )
        logger.debug(
            "Notification sent",
            notification_type=notification.type.value,
            recipient=notification.recipient_email,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
