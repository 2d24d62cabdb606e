"""
Chat service layer.

This module provides the server-side chat operations:

Services:
    ChatService: Persist-then-publish posting and bounded history reads

Design Principles:
    - Services are stateless (use class methods)
    - Expected failures return ServiceResult.failure()
    - Empty text is a silent no-op (ServiceResult.success(None))
    - Persistence is the guarantee; broadcast and push are best-effort
      and never fail a post that has been stored

Usage:
    from chat.services import ChatService

    result = ChatService.post_message(text="hello", sender=request.user)
    if result.success and result.data is not None:
        message = result.data

    result = ChatService.get_history()
    if result.success:
        messages = result.data  # oldest first
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from asgiref.sync import async_to_sync
from django.conf import settings
from django.db import DatabaseError

from core.services import BaseService, ServiceResult

from chat.broadcast import ChannelLayerTransport
from chat.constants import CHAT_CONFIG
from chat.events import message_payload
from chat.models import Message

if TYPE_CHECKING:
    from authentication.models import User
    from chat.protocols import BroadcastTransport


class ChatService(BaseService):
    """
    Service for the global chatroom.

    Methods:
        post_message: Validate, persist and broadcast a new message
        get_history: Most recent messages in chronological order
    """

    @classmethod
    def post_message(
        cls,
        text: str | None,
        sender: User | None,
        transport: BroadcastTransport | None = None,
    ) -> ServiceResult[Message | None]:
        """
        Post a message to the global chatroom.

        Flow:
            1. Require an authenticated sender
            2. Ignore text that is empty after trimming (no row, no event)
               and reject text longer than MAX_TEXT_LENGTH
            3. Insert the row with the sender's current display name
            4. Publish ``new-message`` on the chat channel (best-effort)
            5. Enqueue the closed-tab push notification (best-effort)

        The stored text is exactly what was submitted; trimming is only
        used to decide whether there is anything to post.

        Args:
            text: Submitted text
            sender: Authenticated user the message is attributed to
            transport: Broadcast transport (defaults to the channel layer)

        Returns:
            ServiceResult with the new Message, or with None for the
            empty-text no-op

        Error codes:
            AUTHENTICATION_REQUIRED: No authenticated sender identity
            MESSAGE_TOO_LONG: Text is longer than MAX_TEXT_LENGTH
            INVALID_USERNAME: Sender resolves to a blank display name
        """
        if sender is None or not sender.is_authenticated:
            return ServiceResult.failure(
                "An authenticated sender is required to post",
                error_code="AUTHENTICATION_REQUIRED",
            )

        if not text or not text.strip():
            cls.get_logger().debug(f"Ignoring empty message from user {sender.pk}")
            return ServiceResult.success(None)

        if len(text) > CHAT_CONFIG.MAX_TEXT_LENGTH:
            return ServiceResult.failure(
                f"Message cannot exceed {CHAT_CONFIG.MAX_TEXT_LENGTH} characters",
                error_code="MESSAGE_TOO_LONG",
            )

        username = sender.chat_display_name.strip()
        if not username:
            return ServiceResult.failure(
                "Sender has no display name",
                error_code="INVALID_USERNAME",
            )

        with cls.atomic():
            message = Message.objects.create(text=text, username=username)

        cls.get_logger().debug(
            f"User {sender.pk} posted message {message.id} as {username!r}"
        )

        cls._publish(message, transport)
        cls._enqueue_push(message)

        return ServiceResult.success(message)

    @classmethod
    def get_history(cls, limit: int | None = None) -> ServiceResult[list[Message]]:
        """
        Get the most recent messages, oldest first.

        Args:
            limit: Number of messages (defaults to CHAT_HISTORY_LIMIT,
                clamped to 1..MAX_HISTORY_LIMIT)

        Returns:
            ServiceResult with a list of Messages in chronological order

        Error codes:
            HISTORY_UNAVAILABLE: The message store could not be read
        """
        if limit is None:
            limit = getattr(settings, "CHAT_HISTORY_LIMIT", CHAT_CONFIG.HISTORY_LIMIT)
        limit = max(1, min(limit, CHAT_CONFIG.MAX_HISTORY_LIMIT))

        try:
            messages = Message.objects.recent(limit)
        except DatabaseError as exc:
            return cls.handle_exception(
                exc,
                "Loading chat history",
                error_code="HISTORY_UNAVAILABLE",
            )

        return ServiceResult.success(messages)

    @classmethod
    def _publish(
        cls,
        message: Message,
        transport: BroadcastTransport | None = None,
    ) -> bool:
        """
        Internal: Broadcast a stored message to every subscriber.

        Failures are logged and swallowed: the message is already in
        history and reaches late subscribers on their next history fetch.
        """
        try:
            if transport is None:
                transport = ChannelLayerTransport()
            async_to_sync(transport.publish)(
                CHAT_CONFIG.CHANNEL_NAME,
                CHAT_CONFIG.NEW_MESSAGE_EVENT,
                message_payload(message),
            )
        except Exception:
            cls.get_logger().exception(
                f"Failed to broadcast message {message.id}; "
                "it remains available through history"
            )
            return False
        return True

    @classmethod
    def _enqueue_push(cls, message: Message) -> bool:
        """Internal: Queue the closed-tab push notification (best-effort)."""
        from chat.tasks import send_chat_push_notification

        try:
            send_chat_push_notification.delay(str(message.id))
        except Exception:
            cls.get_logger().exception(
                f"Failed to enqueue push notification for message {message.id}"
            )
            return False
        return True
