"""
Celery tasks for the chat app.

Tasks:
    send_chat_push_notification: Push a new message to closed-tab devices

Design:
    - Tasks receive message_id (UUID string), never model instances
    - Permanent provider errors are logged and end the task
    - Transient errors are re-raised for autoretry

Usage:
    from chat.tasks import send_chat_push_notification

    # Called by ChatService.post_message() after the row is stored
    send_chat_push_notification.delay(str(message.id))
"""

from __future__ import annotations

import logging

from celery import shared_task

from chat.constants import PUSH_CONFIG
from chat.models import Message
from chat.push import PushDeliveryError, build_push_payload, get_push_provider

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_kwargs={"max_retries": 3},
)
def send_chat_push_notification(self, message_id: str) -> bool:
    """
    Send a push notification for a new chat message.

    Flow:
        1. Fetch the message (missing message is a no-op)
        2. Build the payload
        3. Publish on the chat interest through the configured provider
        4. On permanent error: log and stop
        5. On transient error: raise for retry

    Args:
        message_id: UUID string of the Message

    Returns:
        True if published, False if skipped or permanently failed

    Raises:
        PushDeliveryError: On transient failure (triggers retry)
    """
    try:
        message = Message.objects.get(id=message_id)
    except Message.DoesNotExist:
        logger.warning(f"Message {message_id} not found, skipping push")
        return False

    payload = build_push_payload(message)

    try:
        publish_id = get_push_provider().publish(PUSH_CONFIG.INTEREST, payload)
    except PushDeliveryError as e:
        if e.is_permanent:
            logger.warning(
                f"Push permanently failed for message {message_id}: "
                f"{e.error_code} - {e.message}"
            )
            return False
        logger.warning(
            f"Push transiently failed for message {message_id}: "
            f"{e.error_code} - {e.message}, will retry"
        )
        raise

    logger.info(f"Push sent for message {message_id}, publish_id={publish_id}")
    return True
