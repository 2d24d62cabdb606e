"""
User manager for email sign-in.

Chat identity is the email address; the nickname shown in the room is
optional and trimmed on the way in.
"""

from django.contrib.auth.models import BaseUserManager


class UserManager(BaseUserManager):
    """
    Creates chat participants and staff accounts.

    Usage:
        user = User.objects.create_user("peach@example.com", "pw", nickname="Peach")
        admin = User.objects.create_superuser("ops@example.com", "pw")
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create a participant.

        Without a password the account can only sign in once one is set.

        Raises:
            ValueError: If email is blank
        """
        if not email:
            raise ValueError("Users need an email address to join the chat")

        extra_fields["nickname"] = (extra_fields.get("nickname") or "").strip()
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)

        user = self.model(email=self.normalize_email(email), **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create a staff account that can moderate through the admin.

        Raises:
            ValueError: If is_staff or is_superuser is overridden to False
        """
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        for flag in ("is_staff", "is_superuser"):
            if extra_fields[flag] is not True:
                raise ValueError(f"Superuser must have {flag}=True.")

        return self.create_user(email, password, **extra_fields)
