"""
Typed chat events crossing the broadcast transport.

Everything that arrives from a subscription is untrusted until it has been
parsed here. Publishers build payloads with ``message_payload()``;
subscribers turn ``(event_name, payload)`` pairs into ``ChatMessage``
values with ``parse_event()``.

Wire format (event ``new-message``):
    {
        "id": "0b7c...",                        # UUID, optional
        "text": "hello",
        "username": "Peach",
        "created_at": "2026-10-19T12:00:00+00:00"
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from rest_framework import serializers

from chat.constants import CHAT_CONFIG

if TYPE_CHECKING:
    from typing import Any

    from chat.models import Message


class InvalidChatEvent(ValueError):
    """Raised when a transport event cannot be trusted as a chat message."""

    def __init__(self, event_name: str, errors: Any):
        self.event_name = event_name
        self.errors = errors
        super().__init__(f"Invalid {event_name!r} event: {errors}")


@dataclass(frozen=True)
class ChatMessage:
    """
    Immutable client-side view of one chat message.

    Attributes:
        text: Message text
        username: Sender display name
        created_at: Server timestamp
        id: Message UUID (None when the publisher omitted it)
    """

    text: str
    username: str
    created_at: datetime
    id: UUID | None = None

    @classmethod
    def from_model(cls, message: Message) -> ChatMessage:
        return cls(
            id=message.id,
            text=message.text,
            username=message.username,
            created_at=message.created_at,
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": str(self.id) if self.id else None,
            "text": self.text,
            "username": self.username,
            "created_at": self.created_at.isoformat(),
        }


class MessageEventSerializer(serializers.Serializer):
    """Validates the payload of a ``new-message`` event."""

    id = serializers.UUIDField(required=False, allow_null=True)
    text = serializers.CharField(trim_whitespace=False)
    username = serializers.CharField(max_length=CHAT_CONFIG.MAX_USERNAME_LENGTH)
    created_at = serializers.DateTimeField()

    def validate_text(self, value: str) -> str:
        if not value.strip():
            raise serializers.ValidationError("Message text cannot be blank.")
        return value


def message_payload(message: Message) -> dict[str, Any]:
    """Build the ``new-message`` payload for a persisted message."""
    return ChatMessage.from_model(message).to_payload()


def parse_event(event_name: str, payload: Any) -> ChatMessage:
    """
    Validate a transport event and return the chat message it carries.

    Args:
        event_name: Event name delivered by the transport
        payload: Untrusted payload delivered by the transport

    Returns:
        ChatMessage built from validated fields

    Raises:
        InvalidChatEvent: Unknown event name or malformed payload
    """
    if event_name != CHAT_CONFIG.NEW_MESSAGE_EVENT:
        raise InvalidChatEvent(event_name, "unknown event")
    if not isinstance(payload, dict):
        raise InvalidChatEvent(event_name, "payload is not an object")

    serializer = MessageEventSerializer(data=payload)
    if not serializer.is_valid():
        raise InvalidChatEvent(event_name, serializer.errors)

    data = serializer.validated_data
    return ChatMessage(
        id=data.get("id"),
        text=data["text"],
        username=data["username"],
        created_at=data["created_at"],
    )
