"""
In-process ChatBackend for client sessions running inside the server.

Wraps ChatService for asynchronous callers and turns failed results into
exceptions, which is what ChatClientSession expects from a network call.

Usage:
    backend = ServiceChatBackend(user)
    session = ChatClientSession(backend, ChannelLayerTransport(), policy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from channels.db import database_sync_to_async
from django.db import DatabaseError

from core.exceptions import ExternalServiceError

from chat.events import ChatMessage
from chat.services import ChatService

if TYPE_CHECKING:
    from authentication.models import User


class ChatSendError(ExternalServiceError):
    """Raised when a message could not be posted."""

    default_error_code = "CHAT_SEND_FAILED"


class ChatHistoryError(ExternalServiceError):
    """Raised when history could not be loaded."""

    default_error_code = "HISTORY_UNAVAILABLE"


class ServiceChatBackend:
    """
    ChatBackend that calls ChatService directly.

    Args:
        user: Sender identity used for every post
        history_limit: Optional history size override
    """

    def __init__(self, user: User | None, history_limit: int | None = None):
        self.user = user
        self.history_limit = history_limit

    async def post_message(self, text: str) -> None:
        try:
            result = await database_sync_to_async(ChatService.post_message)(
                text, self.user
            )
        except DatabaseError as exc:
            raise ChatSendError("Message could not be stored") from exc
        if not result:
            raise ChatSendError(result.error, error_code=result.error_code)

    async def get_history(self) -> list[ChatMessage]:
        result = await database_sync_to_async(ChatService.get_history)(
            self.history_limit
        )
        if not result:
            raise ChatHistoryError(result.error, error_code=result.error_code)
        return [ChatMessage.from_model(message) for message in result.data]
