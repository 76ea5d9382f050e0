"""In-process pub/sub publisher for room events."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any

from jukebox_rooms.application.interfaces.event_publisher import EventPublisher
from jukebox_rooms.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

ChannelHandler = Callable[[str, dict[str, Any]], Awaitable[None]]


class LocalEventPublisher(EventPublisher):
    """Fans events out to handlers subscribed to a channel in this process.

    Handlers are called concurrently. Exceptions in handlers are logged
    but do not prevent other handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[ChannelHandler]] = defaultdict(list)

    def subscribe(self, channel: str, handler: ChannelHandler) -> None:
        self._handlers[channel].append(handler)
        logger.debug("Subscribed handler to: %s", channel)

    def unsubscribe(self, channel: str, handler: ChannelHandler) -> None:
        handlers = self._handlers.get(channel, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug("Unsubscribed handler from %s", channel)
        if not handlers:
            self._handlers.pop(channel, None)

    def subscriber_count(self, channel: str) -> int:
        return len(self._handlers.get(channel, []))

    async def publish(self, channel: str, event_name: str, payload: dict[str, Any]) -> None:
        handlers = list(self._handlers.get(channel, []))

        if not handlers:
            logger.debug(LogTemplates.NO_SUBSCRIBERS, channel, event_name)
            return

        async def safe_call(handler: ChannelHandler) -> None:
            try:
                await handler(event_name, payload)
            except Exception:
                logger.exception(LogTemplates.SUBSCRIBER_FAILED, channel, event_name)

        async with asyncio.TaskGroup() as tg:
            for handler in handlers:
                tg.create_task(safe_call(handler))

    async def aclose(self) -> None:
        self._handlers.clear()
