"""
Push providers for closed-tab chat notifications.

Devices with no open chat tab subscribe to the ``global-chat`` interest with
a hosted push service. After each message is stored, a Celery task builds a
payload and hands it to the configured provider.

Configuration:
    CHAT_PUSH_PROVIDER = "chat.push.LoggingPushProvider"

Providers raise PushDeliveryError; ``is_permanent`` decides whether the task
retries.

Usage:
    from chat.push import build_push_payload, get_push_provider

    provider = get_push_provider()
    provider.publish(PUSH_CONFIG.INTEREST, build_push_payload(message))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from django.conf import settings
from django.utils.module_loading import import_string

from core.exceptions import ExternalServiceError

from chat.constants import PUSH_CONFIG

if TYPE_CHECKING:
    from typing import Any

    from chat.models import Message

logger = logging.getLogger(__name__)

DEFAULT_PUSH_PROVIDER = "chat.push.LoggingPushProvider"


class PushDeliveryError(ExternalServiceError):
    """
    Raised when a push provider rejects or fails a publish.

    Attributes:
        is_permanent: True when retrying cannot succeed (bad credentials,
            rejected payload); False for timeouts and 5xx responses
    """

    default_error_code = "PUSH_DELIVERY_FAILED"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        is_permanent: bool = False,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.is_permanent = is_permanent


@runtime_checkable
class PushProvider(Protocol):
    """Publishes a notification to every device subscribed to an interest."""

    def publish(self, interest: str, payload: dict[str, Any]) -> str:
        """
        Publish a notification.

        Returns:
            Provider-assigned publish id

        Raises:
            PushDeliveryError: On delivery failure
        """
        ...


class LoggingPushProvider:
    """Provider that only logs; used in development and tests."""

    def publish(self, interest: str, payload: dict[str, Any]) -> str:
        publish_id = f"log-{payload.get('data', {}).get('message_id', 'unknown')}"
        logger.info(
            f"Push to {interest!r}: {payload.get('title')!r} (publish_id={publish_id})"
        )
        return publish_id


def get_push_provider() -> PushProvider:
    """
    Instantiate the provider named by CHAT_PUSH_PROVIDER.

    Raises:
        ImportError: If the dotted path cannot be imported
    """
    path = getattr(settings, "CHAT_PUSH_PROVIDER", DEFAULT_PUSH_PROVIDER)
    return import_string(path)()


def build_push_payload(message: Message) -> dict[str, Any]:
    """Build the push payload for a stored message."""
    body = message.text
    if len(body) > PUSH_CONFIG.MAX_BODY_LENGTH:
        body = body[: PUSH_CONFIG.MAX_BODY_LENGTH - 1] + "…"

    return {
        "title": PUSH_CONFIG.TITLE_TEMPLATE.format(username=message.username),
        "body": body,
        "data": {
            "message_id": str(message.id),
            "username": message.username,
        },
    }
