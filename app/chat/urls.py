"""
URL configuration for chat API.

URL Structure:
    /messages/    GET, POST

All URLs are prefixed with /api/v1/chat/ in the main URL configuration.
"""

from django.urls import path

from chat.views import MessageListCreateView

app_name = "chat"

urlpatterns = [
    path("messages/", MessageListCreateView.as_view(), name="message-list"),
]
