"""
Tests for NicknameService.
"""

from authentication.models import NICKNAME_MAX_LENGTH
from authentication.services import NicknameService
from authentication.tests.factories import UserFactory


class TestSetNickname:
    """Tests for NicknameService.set_nickname."""

    def test_sets_nickname(self, db, user):
        result = NicknameService.set_nickname(user, "Princess Peach")

        assert result.success is True
        user.refresh_from_db()
        assert user.nickname == "Princess Peach"
        assert user.chat_display_name == "Princess Peach"

    def test_strips_surrounding_whitespace(self, db, user):
        result = NicknameService.set_nickname(user, "  Peach  ")

        assert result.success is True
        assert result.data.nickname == "Peach"

    def test_blank_nickname_clears_it(self, db):
        user = UserFactory(email="daisy@example.com", nickname="Daisy")

        result = NicknameService.set_nickname(user, "   ")

        assert result.success is True
        user.refresh_from_db()
        assert user.nickname == ""
        assert user.chat_display_name == "daisy"

    def test_none_clears_nickname(self, db):
        user = UserFactory(nickname="Daisy")

        result = NicknameService.set_nickname(user, None)

        assert result.success is True
        assert result.data.nickname == ""

    def test_too_long_nickname_fails(self, db, user):
        result = NicknameService.set_nickname(user, "x" * (NICKNAME_MAX_LENGTH + 1))

        assert result.success is False
        assert result.error_code == "INVALID_NICKNAME"
        assert "nickname" in result.errors
        user.refresh_from_db()
        assert user.nickname == ""

    def test_nickname_at_limit_is_accepted(self, db, user):
        result = NicknameService.set_nickname(user, "x" * NICKNAME_MAX_LENGTH)

        assert result.success is True
