"""Port for the delivery network that fans room events out to clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class EventPublisher(ABC):
    """Publishes one named event with a JSON payload on one channel."""

    @abstractmethod
    async def publish(self, channel: str, event_name: str, payload: dict[str, Any]) -> None:
        """Hand an event to the delivery network.

        Args:
            channel: Channel key, e.g. ``room-AB12CD``.
            event_name: One of the room event names.
            payload: JSON-serialisable event body.

        Raises:
            Exception: Implementations may raise on delivery failure; the
                broadcaster logs and drops the event.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. No-op by default."""
        return None
