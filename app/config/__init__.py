# =============================================================================
# Live chat project configuration package
# =============================================================================
# Settings, URLs, the ASGI/WSGI applications and the Celery app that
# delivers closed-tab push notifications for new chat messages.
# =============================================================================

from config.celery import app as celery_app

__all__ = ("celery_app",)
