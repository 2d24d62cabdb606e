"""
URL configuration for the live chat backend.

URL Structure:
    /                              - ReDoc API documentation
    /schema/                       - OpenAPI schema (YAML)
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint
    /api/v1/auth/                  - Authentication endpoints
        token/                     - Obtain JWT pair (email + password)
        token/refresh/             - Refresh access token
        nickname/                  - Set chat nickname (PATCH)
    /api/v1/chat/                  - Chat endpoints
        messages/                  - History (GET) and post message (POST)

WebSocket routes live in chat.routing and are mounted by config.asgi.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check

api_v1_patterns = [
    path("auth/", include("authentication.urls")),
    path("chat/", include("chat.urls")),
]

urlpatterns = [
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("admin/", admin.site.urls),
    path("health/", health_check, name="health_check"),
    path("api/v1/", include(api_v1_patterns)),
]

admin.site.site_header = "Live Chat Admin"
admin.site.site_title = "Live Chat Admin"
admin.site.index_title = "Chat administration"
