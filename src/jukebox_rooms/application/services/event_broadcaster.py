"""Fire-and-forget relay of room events to the event publisher."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict, deque
from typing import TYPE_CHECKING

from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.rooms.events import RoomEvent
    from ..interfaces.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class RoomEventBroadcaster:
    """Relays room events without making mutations wait on delivery.

    Events are queued per channel and drained by one task per channel, so a
    room's subscribers see events in the order the mutations were applied.
    A failed publish is logged and dropped; it is never retried.
    """

    def __init__(self, publisher: EventPublisher) -> None:
        self._publisher = publisher
        self._pending: dict[str, deque[RoomEvent]] = defaultdict(deque)
        self._drainers: dict[str, asyncio.Task[None]] = {}

    @property
    def publisher(self) -> EventPublisher:
        return self._publisher

    def emit(self, event: RoomEvent) -> None:
        """Queue an event for its room's channel. Must be called from the event loop."""
        channel = event.channel
        self._pending[channel].append(event)
        if channel not in self._drainers:
            self._drainers[channel] = asyncio.create_task(
                self._drain(channel), name=f"broadcast:{channel}"
            )

    async def _drain(self, channel: str) -> None:
        pending = self._pending[channel]
        try:
            while pending:
                event = pending.popleft()
                try:
                    await self._publisher.publish(channel, event.EVENT_NAME, event.payload())
                    logger.debug(LogTemplates.EVENT_PUBLISHED, event.EVENT_NAME, channel)
                except Exception:
                    logger.exception(LogTemplates.EVENT_PUBLISH_FAILED, event.EVENT_NAME, channel)
        finally:
            self._drainers.pop(channel, None)
            if not pending:
                self._pending.pop(channel, None)

    @property
    def pending_count(self) -> int:
        return sum(len(events) for events in self._pending.values())

    async def flush(self) -> None:
        """Wait until every queued event has been handed to the publisher."""
        while self._drainers:
            await asyncio.gather(*list(self._drainers.values()), return_exceptions=True)

    async def aclose(self) -> None:
        await self.flush()
        await self._publisher.aclose()
