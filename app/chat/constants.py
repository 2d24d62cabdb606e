"""
Constants and configuration for the live chat.

Import example:
    from chat.constants import CHAT_CONFIG, ALERT_CONFIG
"""

from typing import Final


# =============================================================================
# Chat Configuration
# =============================================================================


class CHAT_CONFIG:
    """Configuration for the global chatroom."""

    # Single well-known room shared by every participant
    CHANNEL_NAME: Final[str] = "global-chat"

    # Event published for each persisted message
    NEW_MESSAGE_EVENT: Final[str] = "new-message"

    # History window (overridable per request up to the maximum)
    HISTORY_LIMIT: Final[int] = 50
    MAX_HISTORY_LIMIT: Final[int] = 100

    # Column widths
    MAX_TEXT_LENGTH: Final[int] = 2000
    MAX_USERNAME_LENGTH: Final[int] = 50


# =============================================================================
# Alert Configuration
# =============================================================================


class ALERT_CONFIG:
    """Configuration for background-tab alerts."""

    # Tab title while nothing is unread
    IDLE_TITLE: Final[str] = "Live Chat"

    # Tab title while a message arrived in the background
    UNREAD_TITLE_TEMPLATE: Final[str] = "New Message from {username}"

    # Short cue played for background messages
    SOUND_PATH: Final[str] = "/sounds/pop.mp3"
    SOUND_VOLUME: Final[float] = 0.5


# =============================================================================
# Push Configuration
# =============================================================================


class PUSH_CONFIG:
    """Configuration for closed-tab push notifications."""

    # Devices register interest in the chat channel name
    INTEREST: Final[str] = CHAT_CONFIG.CHANNEL_NAME

    TITLE_TEMPLATE: Final[str] = "New message from {username}"

    # Push bodies are truncated; the full text is in history
    MAX_BODY_LENGTH: Final[int] = 180
