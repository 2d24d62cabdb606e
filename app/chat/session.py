"""
Chat client session: one browser tab's view of the global chatroom.

Lifecycle:
    INITIALIZING -> RECONCILING -> LIVE -> UNMOUNTED

On mount the session fetches history and subscribes to the chat channel at
the same time. Live events that arrive before history resolves are
buffered; once history resolves it seeds the view and the buffered events
are appended in the order they were received. From then on every event is
appended to the end of the view.

There is no local echo: the sender's own message appears when its broadcast
comes back through the subscription.

Failures stay inside the session:
    - history failure: the view starts empty (plus buffered events), no retry
    - send failure: the typed text is put back in the input box
    - subscription failure or drop: live updates stop until remount

Usage:
    session = ChatClientSession(backend, transport, policy)
    await session.mount()
    await session.wait_until_live()

    session.set_input("hello")
    await session.submit()

    await session.unmount()
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING

from chat.constants import CHAT_CONFIG
from chat.events import InvalidChatEvent, parse_event

if TYPE_CHECKING:
    from typing import Any

    from chat.alerts import NotificationPolicy, VisibilityState
    from chat.events import ChatMessage
    from chat.protocols import BroadcastTransport, ChatBackend, Subscription

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    INITIALIZING = "initializing"
    RECONCILING = "reconciling"
    LIVE = "live"
    UNMOUNTED = "unmounted"


class ChatClientSession:
    """
    Ordered, append-only view of the conversation for one tab.

    Args:
        backend: Server operations (post_message, get_history)
        transport: Broadcast transport to subscribe through
        policy: Background-tab alert policy (None disables alerts)
        channel: Chat channel to subscribe to

    Attributes:
        state: Current SessionState
        input_text: Contents of the input box
    """

    def __init__(
        self,
        backend: ChatBackend,
        transport: BroadcastTransport,
        policy: NotificationPolicy | None = None,
        channel: str = CHAT_CONFIG.CHANNEL_NAME,
    ):
        self.backend = backend
        self.transport = transport
        self.policy = policy
        self.channel = channel

        self.state = SessionState.INITIALIZING
        self.input_text = ""

        self._messages: list[ChatMessage] = []
        self._buffered: list[ChatMessage] = []
        self._sending = False
        self._mounted = False

        self._subscription: Subscription | None = None
        self._history_task: asyncio.Task | None = None
        self._listener_task: asyncio.Task | None = None

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def is_sending(self) -> bool:
        return self._sending

    @property
    def is_live(self) -> bool:
        return self.state == SessionState.LIVE

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def mount(self) -> None:
        """
        Start the history fetch and the subscription concurrently.

        Returns once the subscription is open (or has failed). History may
        still be in flight; use wait_until_live() to wait for it.

        Raises:
            RuntimeError: If the session was already mounted
        """
        if self._mounted:
            raise RuntimeError("Chat session can only be mounted once")
        self._mounted = True

        self._history_task = asyncio.create_task(self._load_history())

        try:
            subscription = await self.transport.subscribe(self.channel)
        except Exception:
            logger.exception(
                f"Failed to subscribe to {self.channel}; live updates disabled"
            )
            return

        if self.state == SessionState.UNMOUNTED:
            # Torn down while the subscription was opening
            await subscription.close()
            return

        self._subscription = subscription
        self._listener_task = asyncio.create_task(self._listen(subscription))

    async def wait_until_live(self) -> None:
        """
        Wait for history to resolve and the buffered events to be replayed.

        Returns quietly if the session is unmounted while waiting.
        """
        if self._history_task is None:
            return
        try:
            await asyncio.shield(self._history_task)
        except asyncio.CancelledError:
            if not self._history_task.cancelled():
                raise

    async def unmount(self) -> None:
        """
        Tear the session down.

        Cancels the history fetch and the listener, then releases the
        subscription. After this the session ignores every event and call.
        """
        if self.state == SessionState.UNMOUNTED:
            return
        self.state = SessionState.UNMOUNTED
        self._buffered.clear()

        tasks = [
            task
            for task in (self._listener_task, self._history_task)
            if task is not None and not task.done()
        ]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        if self._subscription is not None:
            await self._subscription.close()
            self._subscription = None

        logger.info(f"Chat session on {self.channel} unmounted")

    async def _load_history(self) -> None:
        try:
            history = list(await self.backend.get_history())
        except Exception:
            logger.exception(
                "Failed to load chat history; starting with an empty view"
            )
            history = []

        if self.state == SessionState.UNMOUNTED:
            return

        self.state = SessionState.RECONCILING
        self._messages = history + self._buffered
        if self._buffered:
            logger.debug(
                f"Replayed {len(self._buffered)} events received before history"
            )
        self._buffered = []
        self.state = SessionState.LIVE

    async def _listen(self, subscription: Subscription) -> None:
        try:
            async for event_name, payload in subscription:
                self.handle_event(event_name, payload)
        except Exception:
            logger.exception(
                f"Subscription to {self.channel} failed; live updates stopped"
            )

    # =========================================================================
    # Events
    # =========================================================================

    def handle_event(self, event_name: str, payload: Any) -> ChatMessage | None:
        """
        Take one event from the subscription.

        Invalid events are logged and dropped. Alerts are decided at receipt
        time, also for events that are buffered until history resolves, and
        run after the message is stored so an alert failure cannot lose it.

        Returns:
            The parsed message, or None if the event was dropped
        """
        if self.state == SessionState.UNMOUNTED:
            return None

        try:
            message = parse_event(event_name, payload)
        except InvalidChatEvent as e:
            logger.warning(f"Dropping event on {self.channel}: {e}")
            return None

        if self.state == SessionState.LIVE:
            self._messages.append(message)
        else:
            self._buffered.append(message)

        if self.policy is not None:
            try:
                self.policy.on_message_received(message)
            except Exception:
                logger.exception(
                    f"Alert for message from {message.username} failed"
                )
        return message

    def on_visibility_change(self, state: VisibilityState) -> None:
        if self.state == SessionState.UNMOUNTED or self.policy is None:
            return
        self.policy.on_visibility_change(state)

    # =========================================================================
    # Send path
    # =========================================================================

    def set_input(self, text: str) -> None:
        if self.state == SessionState.UNMOUNTED:
            return
        self.input_text = text

    async def submit(self) -> bool:
        """
        Send the input box contents.

        The input is cleared while the call is in flight and restored if it
        fails. A second submit while one is in flight is ignored.

        Returns:
            True if the server accepted the message
        """
        if self.state == SessionState.UNMOUNTED or self._sending:
            return False

        text = self.input_text
        if not text.strip():
            return False

        self._sending = True
        self.input_text = ""
        try:
            await self.backend.post_message(text)
        except Exception:
            logger.warning(
                "Failed to send chat message; restoring input", exc_info=True
            )
            if self.state != SessionState.UNMOUNTED:
                self.input_text = text
            return False
        finally:
            self._sending = False

        return True
