"""
Create the append-only chat message log.

Changes:
    - Create Message with UUID primary key, text, username and created_at
    - Add descending created_at index used by history reads
"""

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Message",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("text", models.TextField(help_text="Message text as submitted")),
                (
                    "username",
                    models.CharField(
                        help_text="Sender display name resolved at post time",
                        max_length=50,
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["-created_at"], name="idx_messages_created_at"
                    )
                ],
            },
        ),
    ]
