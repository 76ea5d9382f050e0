"""Periodic expiry of inactive and over-age rooms."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from jukebox_rooms.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...application.services.room_models import SweepStats
    from ...application.services.room_service import RoomApplicationService
    from ...config.settings import RoomSettings

logger = logging.getLogger(__name__)


class RoomExpiryJob:
    def __init__(
        self,
        *,
        room_service: RoomApplicationService,
        settings: RoomSettings,
    ) -> None:
        self._room_service = room_service
        self._settings = settings
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def interval_seconds(self) -> int:
        return self._settings.sweep_interval_minutes * 60

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.EXPIRY_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(LogTemplates.EXPIRY_STARTED, self.interval_seconds)

    async def stop(self) -> None:
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.EXPIRY_STOPPED)

    async def _run_loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self.interval_seconds)
            except asyncio.CancelledError:
                break

            try:
                await self.run_once()
            except Exception:
                logger.exception(LogTemplates.EXPIRY_SWEEP_FAILED)

    async def run_once(self) -> SweepStats:
        return await self._room_service.expiry_sweep()

    @property
    def is_running(self) -> bool:
        return self._running
