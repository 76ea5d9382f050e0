"""Pusher Channels publisher built on the official ``pusher`` SDK."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pusher import Pusher

from jukebox_rooms.application.interfaces.event_publisher import EventPublisher
from jukebox_rooms.config.settings import PusherSettings
from jukebox_rooms.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class PusherEventPublisher(EventPublisher):
    """Triggers room events on Pusher Channels.

    The SDK client is synchronous, so each trigger runs in a worker thread
    to keep the event loop free. Errors from the SDK propagate to the
    broadcaster, which logs and drops them.
    """

    def __init__(self, settings: PusherSettings, *, client: Pusher | None = None) -> None:
        self._settings = settings
        self._client = client

    def _get_client(self) -> Pusher:
        if self._client is None:
            self._client = Pusher(
                app_id=self._settings.app_id,
                key=self._settings.key,
                secret=self._settings.secret.get_secret_value(),
                cluster=self._settings.cluster,
                ssl=self._settings.use_tls,
                timeout=self._settings.timeout_seconds,
            )
            logger.debug(LogTemplates.PUSHER_CLIENT_CREATED, self._settings.cluster)
        return self._client

    async def publish(self, channel: str, event_name: str, payload: dict[str, Any]) -> None:
        client = self._get_client()
        await asyncio.to_thread(client.trigger, channel, event_name, payload)

    async def aclose(self) -> None:
        self._client = None
