"""
WebSocket URL routing for the chat application.

URL Patterns:
    ws/chat/ - Live events of the global chatroom

Authentication:
    JWT token passed as ?token=<jwt_access_token> or as the
    ``jwt, <token>`` subprotocol pair; see chat.middleware.
"""

from django.urls import path

from chat import consumers

websocket_urlpatterns = [
    path("ws/chat/", consumers.ChatConsumer.as_asgi()),
]
