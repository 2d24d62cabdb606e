"""
Serializers for authentication API.

Serializers:
    UserSerializer: Current user with resolved chat display name
    NicknameSerializer: Nickname update payload
"""

from rest_framework import serializers

from authentication.models import NICKNAME_MAX_LENGTH, User


class UserSerializer(serializers.ModelSerializer):
    """Read-only user representation used by the nickname endpoint."""

    display_name = serializers.CharField(
        source="chat_display_name",
        read_only=True,
        help_text="Name attached to messages this user posts",
    )

    class Meta:
        model = User
        fields = ["id", "email", "nickname", "display_name"]
        read_only_fields = fields


class NicknameSerializer(serializers.Serializer):
    """
    Nickname update payload.

    A blank nickname is accepted and clears the current one.
    """

    nickname = serializers.CharField(
        max_length=NICKNAME_MAX_LENGTH,
        allow_blank=True,
        help_text="New chat nickname; blank resets to the email local part",
    )
