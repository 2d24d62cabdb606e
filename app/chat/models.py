"""
Chat system models.

Models:
    Message: One line posted to the global chatroom

Design Decisions:
    - Messages are append-only: created once, never edited or deleted
    - The sender's display name is copied at post time, so later nickname
      changes do not rewrite history
    - History is read newest-first through the created_at index and
      reversed for display
"""

from __future__ import annotations

from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

from chat.constants import CHAT_CONFIG


class MessageQuerySet(models.QuerySet):
    """QuerySet for chat messages."""

    def recent(self, limit: int) -> list[Message]:
        """
        Return the ``limit`` most recent messages, oldest first.

        The query walks the created_at index newest-first, then the
        slice is reversed so callers can render it directly.
        """
        newest_first = list(self.order_by("-created_at", "-id")[:limit])
        newest_first.reverse()
        return newest_first


class Message(UUIDPrimaryKeyMixin, BaseModel):
    """
    A message in the global chatroom.

    Fields:
        id: UUID generated at creation
        text: Non-empty text as submitted by the sender
        username: Sender's display name at the time of posting
        created_at: Server-assigned timestamp used for display order

    Invariants:
        - Never updated after insert (save() refuses existing rows)
        - No delete operation is exposed
    """

    text = models.TextField(
        help_text="Message text as submitted",
    )
    username = models.CharField(
        max_length=CHAT_CONFIG.MAX_USERNAME_LENGTH,
        help_text="Sender display name resolved at post time",
    )

    objects = MessageQuerySet.as_manager()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["-created_at"],
                name="idx_messages_created_at",
            ),
        ]

    def __str__(self) -> str:
        preview = self.text[:50] + ("..." if len(self.text) > 50 else "")
        return f"{self.username}: {preview}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Chat messages are immutable once created")
        super().save(*args, **kwargs)
