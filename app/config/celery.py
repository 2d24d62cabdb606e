"""
Celery configuration for the live chat backend.

Celery runs the work that must never block a chat post:
- Push notifications to devices with no open chat tab

Redis is used as both the message broker and result backend.
Tasks are auto-discovered from all installed Django apps.

Usage:
    from chat.tasks import send_chat_push_notification

    send_chat_push_notification.delay(str(message.id))
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("livechat")

# All Celery settings are prefixed with CELERY_ in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")

app.autodiscover_tasks()
