"""
Chat application configuration.

This app provides the global chatroom:
- Message store and bounded history
- Broadcast of new messages over the channel layer
- Client session state machine and background-tab alerts
- Closed-tab push notifications
"""

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuration for the chat application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "chat"
    verbose_name = "Chat"
