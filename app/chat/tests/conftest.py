"""
Test configuration and fixtures for chat tests.

This module provides:
- A clean in-memory channel layer per test
- Sender fixtures and JWT-authenticated API clients
- Fake collaborators for client sessions (see fakes.py)

Usage:
    def test_example(sender, sender_client):
        response = sender_client.post('/api/v1/chat/messages/', {"text": "hi"})
        assert response.status_code == 201
"""

import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory, access_token_for
from chat.alerts import NotificationPermission, NotificationPolicy, VisibilityState
from chat.tests.fakes import (
    FakeBackend,
    FakeNotifier,
    FakePermissions,
    FakeSoundPlayer,
    FakeTab,
    FakeTransport,
    FakeVisibility,
)


# =============================================================================
# Channel Layer
# =============================================================================


@pytest.fixture(autouse=True)
def channel_layer():
    """In-memory channel layer, emptied before and after each test."""
    layer = get_channel_layer()
    async_to_sync(layer.flush)()
    yield layer
    async_to_sync(layer.flush)()


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def sender(db):
    """A user chatting under a nickname."""
    return UserFactory(email="mario@example.com", nickname="Mario")


@pytest.fixture
def other_user(db):
    """A user without a nickname (display name is the email local part)."""
    return UserFactory(email="luigi@example.com")


@pytest.fixture
def api_client():
    """Unauthenticated API client for public endpoints."""
    return APIClient()


@pytest.fixture
def sender_client(sender):
    """API client authenticated as the sender."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token_for(sender)}")
    return client


# =============================================================================
# Client Session Collaborators
# =============================================================================


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def visibility():
    return FakeVisibility(VisibilityState.VISIBLE)


@pytest.fixture
def permissions():
    return FakePermissions(NotificationPermission.DEFAULT)


@pytest.fixture
def sound():
    return FakeSoundPlayer()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def tab():
    return FakeTab()


@pytest.fixture
def policy(visibility, permissions, sound, notifier, tab):
    return NotificationPolicy(
        visibility=visibility,
        permissions=permissions,
        sound=sound,
        notifier=notifier,
        tab=tab,
    )
