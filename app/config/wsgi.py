"""
WSGI entry point for the live chat backend.

Only the HTTP API (history, posting, nicknames) is served over WSGI.
WebSocket subscriptions require the ASGI application in config.asgi.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
