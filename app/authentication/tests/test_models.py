"""
Tests for authentication models.

This module tests:
- User: Email-based identity and chat display name
- UserManager: create_user / create_superuser

Test Organization:
    - Each test validates ONE specific behavior
    - Tests use descriptive names following the pattern: test_<scenario>_<expected_outcome>
"""

import pytest
from django.db import IntegrityError

from authentication.models import NICKNAME_MAX_LENGTH, User
from authentication.tests.factories import UserFactory


# =============================================================================
# User Model Tests
# =============================================================================


class TestUserModel:
    """Tests for the User model."""

    def test_user_email_must_be_unique(self, db, user):
        """
        Email addresses must be unique across all users.

        Why it matters: Email is the USERNAME_FIELD, so duplicates would
        create login ambiguity.
        """
        with pytest.raises(IntegrityError):
            User.objects.create_user(email=user.email, password="DifferentPass123!")

    def test_user_nickname_defaults_to_blank(self, db):
        user = User.objects.create_user(email="new@example.com", password="TestPass123!")

        assert user.nickname == ""

    def test_user_str_returns_email(self, db, user):
        assert str(user) == "peach@example.com"

    def test_user_stores_only_sign_in_and_chat_identity(self):
        fields = {field.name for field in User._meta.concrete_fields}

        assert fields == {
            "id",
            "password",
            "last_login",
            "is_superuser",
            "email",
            "nickname",
            "is_active",
            "is_staff",
            "date_joined",
            "updated_at",
        }


class TestChatDisplayName:
    """
    Tests for User.chat_display_name.

    The display name is copied onto every message the user posts, so it
    must always be non-empty and fit the message username column.
    """

    def test_display_name_falls_back_to_email_local_part(self, db, user):
        assert user.chat_display_name == "peach"

    def test_display_name_uses_nickname_when_set(self, db):
        user = UserFactory(email="peach@example.com", nickname="Princess Peach")

        assert user.chat_display_name == "Princess Peach"

    def test_display_name_strips_nickname_whitespace(self, db):
        user = UserFactory(nickname="  Mario  ")

        assert user.chat_display_name == "Mario"

    def test_whitespace_only_nickname_falls_back_to_email(self, db):
        user = UserFactory(email="luigi@example.com", nickname="   ")

        assert user.chat_display_name == "luigi"

    def test_display_name_truncated_to_column_width(self, db):
        """
        A long email local part never overflows the username column.
        """
        user = UserFactory(email=f"{'a' * 80}@example.com")

        assert len(user.chat_display_name) == NICKNAME_MAX_LENGTH

    def test_full_name_is_display_name(self, db):
        user = UserFactory(nickname="Toad")

        assert user.get_full_name() == "Toad"


# =============================================================================
# UserManager Tests
# =============================================================================


class TestUserManager:
    """Tests for UserManager."""

    def test_create_user_requires_email(self, db):
        with pytest.raises(ValueError, match="email address"):
            User.objects.create_user(email="", password="TestPass123!")

    def test_create_user_hashes_password(self, db):
        user = User.objects.create_user(
            email="hash@example.com", password="TestPass123!"
        )

        assert user.password != "TestPass123!"
        assert user.check_password("TestPass123!")

    def test_create_user_normalizes_email_domain(self, db):
        user = User.objects.create_user(
            email="Test@EXAMPLE.COM", password="TestPass123!"
        )

        # Django's normalize_email lowercases the domain, not the local part
        assert user.email == "Test@example.com"

    def test_create_user_accepts_nickname(self, db):
        user = User.objects.create_user(
            email="yoshi@example.com",
            password="TestPass123!",
            nickname="Yoshi",
        )

        assert user.nickname == "Yoshi"

    def test_create_user_trims_nickname(self, db):
        user = User.objects.create_user(email="boo@example.com", nickname="  Boo  ")

        assert user.nickname == "Boo"

    def test_create_user_without_password_is_unusable(self, db):
        user = User.objects.create_user(email="koopa@example.com")

        assert user.has_usable_password() is False

    def test_create_superuser_sets_flags(self, db, superuser):
        assert superuser.is_staff is True
        assert superuser.is_superuser is True
