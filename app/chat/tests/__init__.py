"""
Tests for chat app.

This package contains test modules for:
- test_models.py: Message model and history query
- test_events.py: Event payload validation
- test_services.py: ChatService tests
- test_views.py: REST API endpoint tests
- test_broadcast.py: Channel layer transport
- test_consumers.py / test_middleware.py: WebSocket delivery and JWT auth
- test_alerts.py: Background-tab alert policy
- test_session.py: Client session state machine
- test_backends.py: In-process ChatBackend
- test_push.py / test_tasks.py: Closed-tab push notifications
- test_integration.py: Two sessions chatting end to end

Usage:
    pytest chat/tests/
    pytest chat/tests/test_session.py
"""
