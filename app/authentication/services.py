"""
Authentication service layer.

Services:
    NicknameService: Chat nickname management

Usage:
    from authentication.services import NicknameService

    result = NicknameService.set_nickname(user, "Princess Peach")
    if result.success:
        user = result.data
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.services import BaseService, ServiceResult

from authentication.models import NICKNAME_MAX_LENGTH

if TYPE_CHECKING:
    from authentication.models import User


class NicknameService(BaseService):
    """
    Service for the name a user is shown under in the chatroom.

    Messages copy the display name at post time, so changing a nickname
    affects only messages sent afterwards.
    """

    @classmethod
    def set_nickname(cls, user: User, nickname: str | None) -> ServiceResult[User]:
        """
        Set or clear the user's chat nickname.

        Surrounding whitespace is stripped. An empty value clears the
        nickname so the email local part is used again.

        Args:
            user: User whose nickname changes
            nickname: New nickname (None or blank clears it)

        Returns:
            ServiceResult with the updated User

        Error codes:
            INVALID_NICKNAME: Nickname longer than the message username column
        """
        nickname = (nickname or "").strip()

        if len(nickname) > NICKNAME_MAX_LENGTH:
            return ServiceResult.failure(
                f"Nickname cannot exceed {NICKNAME_MAX_LENGTH} characters",
                error_code="INVALID_NICKNAME",
                errors={
                    "nickname": [
                        f"Ensure this field has no more than "
                        f"{NICKNAME_MAX_LENGTH} characters."
                    ]
                },
            )

        user.nickname = nickname
        user.save(update_fields=["nickname", "updated_at"])

        cls.get_logger().info(
            f"User {user.id} now chats as {user.chat_display_name!r}"
        )
        return ServiceResult.success(user)
