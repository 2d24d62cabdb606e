"""
Protocol definitions for the chat client session and its collaborators.

Protocols define contracts that collaborators must fulfill, enabling:
- Swapping the broadcast transport (channel layer, hosted pub/sub)
- Driving the client session without a browser (visibility, permission,
  sound and notification providers are injected)
- Easy fakes in tests

Available Protocols:
    Subscription: Live event stream from one channel
    BroadcastTransport: publish/subscribe contract
    ChatBackend: Server operations used by a client session
    VisibilityProvider: Whether the tab is foregrounded
    PermissionProvider: Browser notification permission
    SoundPlayer: Short audio cue
    DesktopNotifier: System notification display
    TabHandle: Tab title and focus

Usage:
    from chat.protocols import BroadcastTransport

    async def announce(transport: BroadcastTransport, payload: dict):
        await transport.publish("global-chat", "new-message", payload)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from typing import Any

    from chat.alerts import NotificationPermission, VisibilityState
    from chat.events import ChatMessage


@runtime_checkable
class Subscription(Protocol):
    """
    A held subscription to one channel.

    Iterating yields ``(event_name, payload)`` pairs for as long as the
    subscription is open. Once closed it cannot be restarted.
    """

    channel: str

    def __aiter__(self) -> AsyncIterator[tuple[str, Any]]: ...

    async def close(self) -> None:
        """Release the subscription. Safe to call more than once."""
        ...


@runtime_checkable
class BroadcastTransport(Protocol):
    """
    Fire-and-forget pub/sub fan-out.

    Publishes from a single publisher are delivered in submission order;
    nothing is promised across publishers.
    """

    async def publish(self, channel: str, event_name: str, payload: dict) -> None:
        """Deliver ``payload`` under ``event_name`` to every subscriber."""
        ...

    async def subscribe(self, channel: str) -> Subscription:
        """Open a new live subscription to ``channel``."""
        ...


@runtime_checkable
class ChatBackend(Protocol):
    """Server operations a client session calls across the network."""

    async def post_message(self, text: str) -> None:
        """Submit text; raises on failure."""
        ...

    async def get_history(self) -> list[ChatMessage]:
        """Recent messages, oldest first; raises on failure."""
        ...


@runtime_checkable
class VisibilityProvider(Protocol):
    """Reports whether the tab is currently visible."""

    def get_visibility(self) -> VisibilityState: ...


@runtime_checkable
class PermissionProvider(Protocol):
    """Browser-owned notification permission."""

    def get_permission(self) -> NotificationPermission: ...

    async def request_permission(self) -> NotificationPermission:
        """Prompt the user. Only ever called from a user gesture."""
        ...


@runtime_checkable
class SoundPlayer(Protocol):
    """Plays the short message cue from the start."""

    def play(self) -> None: ...


@runtime_checkable
class DesktopNotifier(Protocol):
    """Displays a system notification."""

    def show(self, title: str, body: str, on_click: Callable[[], None]) -> None: ...


@runtime_checkable
class TabHandle(Protocol):
    """The browser tab hosting the session."""

    def set_title(self, title: str) -> None: ...

    def focus(self) -> None: ...
