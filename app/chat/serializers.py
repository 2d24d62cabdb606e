"""
Serializers for chat API.

Serializer Hierarchy:
    MessageSerializer: Persisted message (read)
    MessageCreateSerializer: Post a new message (write)
    HistoryQuerySerializer: Query parameters of the history endpoint

Design Decisions:
    - Read and write serializers are separate for clarity
    - Blank text is valid input here; ChatService turns it into a no-op
    - Text is not trimmed; messages are stored exactly as typed
"""

from rest_framework import serializers

from chat.constants import CHAT_CONFIG
from chat.models import Message


class MessageSerializer(serializers.ModelSerializer):
    """
    Serializer for reading messages.

    Same shape as the ``new-message`` event payload, so history and live
    events render the same way.
    """

    class Meta:
        model = Message
        fields = ["id", "text", "username", "created_at"]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    """
    Serializer for posting a message.

    The username is never accepted from the client; it is resolved from the
    authenticated sender.
    """

    text = serializers.CharField(
        allow_blank=True,
        trim_whitespace=False,
        max_length=CHAT_CONFIG.MAX_TEXT_LENGTH,
    )


class HistoryQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/v1/chat/messages/."""

    limit = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=CHAT_CONFIG.MAX_HISTORY_LIMIT,
    )
