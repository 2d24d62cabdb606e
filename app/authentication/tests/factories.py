"""
Factory Boy factories for authentication models.

Usage:
    from authentication.tests.factories import UserFactory

    # Create a user with default values
    user = UserFactory()

    # Create a user who chats under a nickname
    user = UserFactory(nickname="Princess Peach")
"""

import factory
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.models import User


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    Creates users with email-based authentication.
    By default, users are active and have no nickname.

    Examples:
        # Basic user
        user = UserFactory()

        # User with nickname
        user = UserFactory(nickname="Mario")

        # Inactive user (deactivated)
        user = UserFactory(is_active=False)
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    nickname = ""
    is_active = True
    is_staff = False

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(
            email=kwargs.pop("email"), password=password, **kwargs
        )


def access_token_for(user) -> str:
    """JWT access token string for ``user``."""
    return str(RefreshToken.for_user(user).access_token)
