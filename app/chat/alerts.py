"""
Background-tab alert policy for a chat client session.

A message that arrives while the tab is hidden may:
    - play the short sound cue (unless muted for this session)
    - raise a system notification (only when permission is granted)
    - set the tab title to "New Message from <username>"

Nothing fires while the tab is visible. The title goes back to the idle
label as soon as the tab is visible again.

Browser capabilities are injected through the providers in chat.protocols,
so the policy runs without a browser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from chat.constants import ALERT_CONFIG

if TYPE_CHECKING:
    from chat.events import ChatMessage
    from chat.protocols import (
        DesktopNotifier,
        PermissionProvider,
        SoundPlayer,
        TabHandle,
        VisibilityProvider,
    )

logger = logging.getLogger(__name__)


class VisibilityState(str, Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"


class NotificationPermission(str, Enum):
    """Mirrors the browser's Notification.permission values."""

    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class AlertOutcome:
    """Which side effects a received message triggered."""

    sound_played: bool = False
    notified: bool = False
    title_changed: bool = False

    @property
    def any(self) -> bool:
        return self.sound_played or self.notified or self.title_changed


class NotificationPolicy:
    """
    Decides the out-of-band effects of each received message.

    Args:
        visibility: Current tab visibility
        permissions: Browser notification permission
        sound: Sound cue player
        notifier: System notification display
        tab: Tab title and focus handle
        idle_title: Title shown while nothing is unread
    """

    def __init__(
        self,
        visibility: VisibilityProvider,
        permissions: PermissionProvider,
        sound: SoundPlayer,
        notifier: DesktopNotifier,
        tab: TabHandle,
        idle_title: str = ALERT_CONFIG.IDLE_TITLE,
    ):
        self.visibility = visibility
        self.permissions = permissions
        self.sound = sound
        self.notifier = notifier
        self.tab = tab
        self.idle_title = idle_title
        self._muted = False
        self._permission = permissions.get_permission()

    @property
    def muted(self) -> bool:
        return self._muted

    def toggle_mute(self) -> bool:
        """Flip the session mute switch. Returns the new value."""
        self._muted = not self._muted
        return self._muted

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    @property
    def can_request_permission(self) -> bool:
        """True while the one-tap permission affordance should be offered."""
        return self._permission == NotificationPermission.DEFAULT

    async def request_permission(self) -> NotificationPermission:
        """
        Ask the browser for notification permission.

        Only call this from a user gesture; the policy never prompts on its
        own. Once the user has answered, the browser's answer is kept.
        A failed request counts as a denial.
        """
        if not self.can_request_permission:
            return self._permission

        try:
            answer = await self.permissions.request_permission()
        except Exception:
            logger.exception("Notification permission request failed")
            self._permission = NotificationPermission.DENIED
            return self._permission

        self._permission = NotificationPermission(answer)
        logger.info(f"Notification permission is now {self._permission.value}")
        return self._permission

    def on_message_received(self, message: ChatMessage) -> AlertOutcome:
        """Apply background-tab effects for a message received now."""
        if self.visibility.get_visibility() != VisibilityState.HIDDEN:
            return AlertOutcome()

        sound_played = False
        if not self._muted:
            try:
                self.sound.play()
                sound_played = True
            except Exception:
                logger.exception("Failed to play the message sound cue")

        notified = False
        if self._permission == NotificationPermission.GRANTED:
            try:
                self.notifier.show(
                    title=message.username,
                    body=message.text,
                    on_click=self.tab.focus,
                )
                notified = True
            except Exception:
                logger.exception("Failed to show the message notification")

        self.tab.set_title(
            ALERT_CONFIG.UNREAD_TITLE_TEMPLATE.format(username=message.username)
        )

        return AlertOutcome(
            sound_played=sound_played,
            notified=notified,
            title_changed=True,
        )

    def on_visibility_change(self, state: VisibilityState) -> None:
        if VisibilityState(state) == VisibilityState.VISIBLE:
            self.tab.set_title(self.idle_title)
