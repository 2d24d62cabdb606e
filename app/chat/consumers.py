"""
WebSocket consumer for the global chatroom.

Browsers without an in-process session receive live events through this
consumer: it joins the chat channel's group and forwards every ``chat.event``
published by ChatService to the socket.

Authentication:
    JWTAuthMiddleware attaches the user to self.scope["user"].
    Anonymous sockets are closed with code 4001.

Message Types (from client):
    - message: Post a new message {"type": "message", "text": "Hello!"}

Frames (to client):
    - {"type": "event", "event": "new-message", "payload": {...}}
    - {"type": "error", "error_code": "...", "message": "..."}

A failed send answers with an error frame and leaves the socket open.
"""

from __future__ import annotations

import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.db import DatabaseError

from chat.constants import CHAT_CONFIG
from chat.middleware import JWT_SUBPROTOCOL
from chat.services import ChatService

logger = logging.getLogger(__name__)

CLOSE_UNAUTHENTICATED = 4001


class ChatConsumer(AsyncJsonWebsocketConsumer):
    """
    WebSocket consumer for the global chatroom.

    Attributes:
        group_name: Channel layer group the socket listens on
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.group_name: str | None = None

    async def connect(self):
        user = self.scope.get("user")

        if not user or not user.is_authenticated:
            logger.warning("Rejected unauthenticated chat connection")
            await self.close(code=CLOSE_UNAUTHENTICATED)
            return

        self.group_name = CHAT_CONFIG.CHANNEL_NAME
        await self.channel_layer.group_add(self.group_name, self.channel_name)

        # Echo the subprotocol back when the token came through it
        subprotocol = (
            JWT_SUBPROTOCOL
            if JWT_SUBPROTOCOL in self.scope.get("subprotocols", [])
            else None
        )
        await self.accept(subprotocol=subprotocol)
        logger.info(f"User {user.pk} connected to {self.group_name}")

    async def disconnect(self, close_code):
        if self.group_name:
            await self.channel_layer.group_discard(self.group_name, self.channel_name)
            user = self.scope.get("user")
            logger.info(
                f"User {user.pk} disconnected from {self.group_name} ({close_code})"
            )

    async def receive_json(self, content, **kwargs):
        message_type = content.get("type") if isinstance(content, dict) else None

        if message_type == "message":
            await self._handle_message(content)
        else:
            await self.send_json(
                {
                    "type": "error",
                    "error_code": "UNKNOWN_MESSAGE_TYPE",
                    "message": f"Unknown message type: {message_type}",
                }
            )

    async def _handle_message(self, content):
        """
        Post a message through ChatService.

        There is no local echo: the sender sees its message when the
        broadcast comes back through chat_event.
        """
        text = content.get("text")
        if not isinstance(text, str):
            text = ""

        try:
            result = await database_sync_to_async(ChatService.post_message)(
                text, self.scope["user"]
            )
        except DatabaseError:
            logger.exception(
                f"Failed to store message from user {self.scope['user'].pk}"
            )
            await self.send_json(
                {
                    "type": "error",
                    "error_code": "CHAT_SEND_FAILED",
                    "message": "Message could not be sent, please retry",
                }
            )
            return

        if not result:
            await self.send_json(
                {
                    "type": "error",
                    "error_code": result.error_code,
                    "message": result.error,
                }
            )

    async def chat_event(self, event):
        """Forward a chat.event from the channel layer to the socket."""
        await self.send_json(
            {
                "type": "event",
                "event": event["event"],
                "payload": event["payload"],
            }
        )
