"""
Tests for chat Celery tasks.

Tasks are called directly (not via .delay) so retries do not run.
"""

from unittest.mock import patch

import pytest

from chat.push import PushDeliveryError
from chat.tasks import send_chat_push_notification
from chat.tests.factories import MessageFactory

PROVIDERS = "chat.tests.test_tasks"


class RecordingProvider:
    calls: list = []

    def publish(self, interest, payload):
        RecordingProvider.calls.append((interest, payload))
        return "pub-1"


class RejectingProvider:
    def publish(self, interest, payload):
        raise PushDeliveryError("invalid credentials", is_permanent=True)


class FlakyProvider:
    def publish(self, interest, payload):
        raise PushDeliveryError("gateway timeout", error_code="TIMEOUT")


@pytest.fixture(autouse=True)
def reset_recording_provider():
    RecordingProvider.calls = []


class TestSendChatPushNotification:
    def test_publishes_to_chat_interest(self, db, settings):
        settings.CHAT_PUSH_PROVIDER = f"{PROVIDERS}.RecordingProvider"
        message = MessageFactory(text="hello", username="Mario")

        result = send_chat_push_notification(str(message.id))

        assert result is True
        assert len(RecordingProvider.calls) == 1
        interest, payload = RecordingProvider.calls[0]
        assert interest == "global-chat"
        assert payload["title"] == "New message from Mario"
        assert payload["data"]["message_id"] == str(message.id)

    def test_missing_message_is_skipped(self, db, settings):
        settings.CHAT_PUSH_PROVIDER = f"{PROVIDERS}.RecordingProvider"

        result = send_chat_push_notification("00000000-0000-0000-0000-000000000000")

        assert result is False
        assert RecordingProvider.calls == []

    def test_permanent_failure_is_not_retried(self, db, settings):
        settings.CHAT_PUSH_PROVIDER = f"{PROVIDERS}.RejectingProvider"
        message = MessageFactory()

        assert send_chat_push_notification(str(message.id)) is False

    def test_transient_failure_raises_for_retry(self, db, settings):
        settings.CHAT_PUSH_PROVIDER = f"{PROVIDERS}.FlakyProvider"
        message = MessageFactory()

        with pytest.raises(PushDeliveryError) as exc_info:
            send_chat_push_notification(str(message.id))

        assert exc_info.value.error_code == "TIMEOUT"

    def test_default_provider_succeeds(self, db):
        message = MessageFactory()

        with patch("chat.push.logger") as mock_logger:
            assert send_chat_push_notification(str(message.id)) is True

        mock_logger.info.assert_called_once()
