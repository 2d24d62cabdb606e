"""
Tests for chat event payload validation.
"""

import uuid
from datetime import datetime, timezone

import pytest

from chat.events import ChatMessage, InvalidChatEvent, message_payload, parse_event
from chat.tests.factories import MessageFactory


def valid_payload(**overrides):
    payload = {
        "id": str(uuid.uuid4()),
        "text": "hello",
        "username": "Mario",
        "created_at": "2026-10-19T12:00:00+00:00",
    }
    payload.update(overrides)
    return payload


class TestParseEvent:
    def test_valid_payload_returns_chat_message(self):
        payload = valid_payload()

        message = parse_event("new-message", payload)

        assert isinstance(message, ChatMessage)
        assert message.id == uuid.UUID(payload["id"])
        assert message.text == "hello"
        assert message.username == "Mario"
        assert message.created_at == datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def test_id_is_optional(self):
        payload = valid_payload()
        del payload["id"]

        assert parse_event("new-message", payload).id is None

    def test_text_keeps_surrounding_whitespace(self):
        message = parse_event("new-message", valid_payload(text="  spaced  "))

        assert message.text == "  spaced  "

    def test_unknown_event_name_is_rejected(self):
        with pytest.raises(InvalidChatEvent) as exc_info:
            parse_event("typing", valid_payload())

        assert exc_info.value.event_name == "typing"

    @pytest.mark.parametrize("payload", [None, "hello", ["hello"], 42])
    def test_non_object_payload_is_rejected(self, payload):
        with pytest.raises(InvalidChatEvent):
            parse_event("new-message", payload)

    @pytest.mark.parametrize("field", ["text", "username", "created_at"])
    def test_missing_required_field_is_rejected(self, field):
        payload = valid_payload()
        del payload[field]

        with pytest.raises(InvalidChatEvent) as exc_info:
            parse_event("new-message", payload)

        assert field in exc_info.value.errors

    def test_blank_text_is_rejected(self):
        with pytest.raises(InvalidChatEvent):
            parse_event("new-message", valid_payload(text="   "))

    def test_overlong_username_is_rejected(self):
        with pytest.raises(InvalidChatEvent):
            parse_event("new-message", valid_payload(username="x" * 51))

    def test_malformed_timestamp_is_rejected(self):
        with pytest.raises(InvalidChatEvent):
            parse_event("new-message", valid_payload(created_at="yesterday"))


class TestMessagePayload:
    def test_payload_of_stored_message_parses_back(self, db):
        message = MessageFactory(text="hello", username="Mario")

        payload = message_payload(message)
        parsed = parse_event("new-message", payload)

        assert payload["id"] == str(message.id)
        assert parsed == ChatMessage.from_model(message)
