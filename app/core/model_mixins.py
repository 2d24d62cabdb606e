"""
Abstract model mixins shared by domain models.

Mixins:
    UUIDPrimaryKeyMixin: UUID primary key generated at creation

Usage:
    from core.model_mixins import UUIDPrimaryKeyMixin
    from core.models import BaseModel

    class Message(UUIDPrimaryKeyMixin, BaseModel):
        text = models.TextField()

Note:
    Always list mixins before BaseModel in inheritance.
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use UUID as primary key instead of auto-increment integer.

    The identifier is generated in Python before the insert, so it is
    known to the caller as soon as the row exists and can be published
    alongside the row without a second query.

    Fields:
        id: UUIDField as primary key (auto-generated)
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True
