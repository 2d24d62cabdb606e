"""
Authentication models.

This module defines the chat participant identity:
- User: Custom user model with email-based authentication and a chat nickname

Related files:
    - managers.py: Custom user manager for email-based creation
    - services.py: NicknameService business logic

Security:
    - User passwords hashed with Django's PBKDF2
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from authentication.managers import UserManager

# Matches the width of chat.Message.username
NICKNAME_MAX_LENGTH = 50


class User(AbstractBaseUser, PermissionsMixin):
    """
    Custom User model using email as the primary identifier.

    Fields:
        email: Primary identifier, unique, used for login
        nickname: Optional display name shown on chat messages
        is_active: Whether the user account is active
        is_staff: Whether the user can access Django admin
        date_joined: When the user account was created
        updated_at: When the user record was last modified

    Usage:
        user = User.objects.create_user(
            email='peach@example.com',
            password='securepassword'
        )
        user.chat_display_name  # "peach"
    """

    email = models.EmailField(
        unique=True,
        db_index=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    nickname = models.CharField(
        max_length=NICKNAME_MAX_LENGTH,
        blank=True,
        default="",
        help_text="Display name attached to chat messages (blank uses email local part)",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active. Deselect instead of deleting.",
    )
    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.email

    def get_full_name(self):
        return self.chat_display_name

    def get_short_name(self):
        return self.email.split("@")[0]

    @property
    def chat_display_name(self) -> str:
        """
        Name attributed to this user's chat messages.

        The nickname wins when set; otherwise the local part of the email
        is used. Always fits in a chat message's username column.
        """
        name = self.nickname.strip() or self.email.split("@")[0]
        return name[:NICKNAME_MAX_LENGTH]
