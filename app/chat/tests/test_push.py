"""
Tests for push payloads and provider lookup.
"""

import pytest

from chat.constants import PUSH_CONFIG
from chat.push import (
    LoggingPushProvider,
    PushDeliveryError,
    PushProvider,
    build_push_payload,
    get_push_provider,
)
from chat.tests.factories import MessageFactory


class RecordingPushProvider:
    def publish(self, interest, payload):
        return "recorded"


class TestBuildPushPayload:
    def test_payload_shape(self, db):
        message = MessageFactory(text="hello", username="Mario")

        payload = build_push_payload(message)

        assert payload == {
            "title": "New message from Mario",
            "body": "hello",
            "data": {"message_id": str(message.id), "username": "Mario"},
        }

    def test_long_body_is_truncated(self, db):
        message = MessageFactory(text="x" * 500)

        body = build_push_payload(message)["body"]

        assert len(body) == PUSH_CONFIG.MAX_BODY_LENGTH
        assert body.endswith("…")

    def test_body_at_limit_is_untouched(self, db):
        text = "y" * PUSH_CONFIG.MAX_BODY_LENGTH
        message = MessageFactory(text=text)

        assert build_push_payload(message)["body"] == text


class TestGetPushProvider:
    def test_default_is_logging_provider(self, settings):
        del settings.CHAT_PUSH_PROVIDER

        assert isinstance(get_push_provider(), LoggingPushProvider)

    def test_configured_provider(self, settings):
        settings.CHAT_PUSH_PROVIDER = "chat.tests.test_push.RecordingPushProvider"

        provider = get_push_provider()

        assert isinstance(provider, RecordingPushProvider)
        assert isinstance(provider, PushProvider)

    def test_unknown_provider_raises(self, settings):
        settings.CHAT_PUSH_PROVIDER = "chat.tests.test_push.MissingProvider"

        with pytest.raises(ImportError):
            get_push_provider()


class TestLoggingPushProvider:
    def test_publish_id_uses_message_id(self):
        payload = {"title": "New message from Mario", "data": {"message_id": "abc"}}

        assert LoggingPushProvider().publish("global-chat", payload) == "log-abc"


class TestPushDeliveryError:
    def test_defaults(self):
        error = PushDeliveryError("timeout")

        assert error.error_code == "PUSH_DELIVERY_FAILED"
        assert error.is_permanent is False

    def test_permanent(self):
        error = PushDeliveryError(
            "bad key", error_code="UNAUTHORIZED", is_permanent=True
        )

        assert error.is_permanent is True
        assert str(error) == "[UNAUTHORIZED] bad key"
