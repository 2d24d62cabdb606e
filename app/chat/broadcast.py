"""
Broadcast transport over the Django Channels channel layer.

Every chat channel maps to one channel-layer group. Publishing is a
``group_send``; subscribing creates a private channel, adds it to the group
and reads from it until the subscription is closed.

Channel layer message shape:
    {"type": "chat.event", "event": "new-message", "payload": {...}}

The ``type`` routes the message to ``ChatConsumer.chat_event`` for
WebSocket clients; in-process subscribers read the same messages through
``ChannelLayerSubscription``.

Usage:
    transport = ChannelLayerTransport()
    subscription = await transport.subscribe("global-chat")
    try:
        async for event_name, payload in subscription:
            ...
    finally:
        await subscription.close()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from channels.layers import get_channel_layer
from django.core.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from typing import Any

    from channels.layers import BaseChannelLayer

logger = logging.getLogger(__name__)

# Routes channel layer messages to ChatConsumer.chat_event
EVENT_MESSAGE_TYPE = "chat.event"


class ChannelLayerSubscription:
    """
    Live subscription to one channel-layer group.

    Attributes:
        channel: Chat channel (group) name
        channel_name: Private channel-layer channel receiving the group's messages
    """

    def __init__(self, layer: BaseChannelLayer, channel: str, channel_name: str):
        self._layer = layer
        self.channel = channel
        self.channel_name = channel_name
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> AsyncIterator[tuple[str, Any]]:
        return self._events()

    async def _events(self) -> AsyncIterator[tuple[str, Any]]:
        while not self._closed:
            message = await self._layer.receive(self.channel_name)
            if self._closed:
                break
            if message.get("type") != EVENT_MESSAGE_TYPE:
                logger.debug(
                    f"Ignoring {message.get('type')!r} message on {self.channel_name}"
                )
                continue
            yield message.get("event"), message.get("payload")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._layer.group_discard(self.channel, self.channel_name)
        logger.info(f"Closed subscription {self.channel_name} to {self.channel}")


class ChannelLayerTransport:
    """
    BroadcastTransport backed by a channel layer.

    Args:
        layer: Channel layer instance (defaults to the configured default layer)
    """

    def __init__(self, layer: BaseChannelLayer | None = None):
        if layer is None:
            layer = get_channel_layer()
        if layer is None:
            raise ImproperlyConfigured(
                "CHANNEL_LAYERS must define a default layer for chat broadcasts"
            )
        self.layer = layer

    async def publish(self, channel: str, event_name: str, payload: dict) -> None:
        await self.layer.group_send(
            channel,
            {
                "type": EVENT_MESSAGE_TYPE,
                "event": event_name,
                "payload": payload,
            },
        )

    async def subscribe(self, channel: str) -> ChannelLayerSubscription:
        channel_name = await self.layer.new_channel()
        await self.layer.group_add(channel, channel_name)
        logger.info(f"Opened subscription {channel_name} to {channel}")
        return ChannelLayerSubscription(self.layer, channel, channel_name)
