"""
ASGI config for the live chat backend.

This configuration supports:
- HTTP requests via Django (history, posting, nicknames, admin)
- WebSocket subscriptions to the global chat channel via Django Channels

Uvicorn uses this entry point:
    uvicorn config.asgi:application
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# Initialize Django before importing anything that touches models
django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter  # noqa: E402
from channels.security.websocket import AllowedHostsOriginValidator  # noqa: E402

from chat.middleware import JWTAuthMiddleware  # noqa: E402
from chat.routing import websocket_urlpatterns  # noqa: E402

application = ProtocolTypeRouter(
    {
        "http": django_asgi_app,
        # 1. AllowedHostsOriginValidator - origin must match ALLOWED_HOSTS
        # 2. JWTAuthMiddleware - resolves the user from the JWT
        # 3. URLRouter - dispatches to the chat consumer
        "websocket": AllowedHostsOriginValidator(
            JWTAuthMiddleware(URLRouter(websocket_urlpatterns))
        ),
    }
)
