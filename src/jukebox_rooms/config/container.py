"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the room store, event publishing, the room
service and the expiry job. Components are created on-demand and cached for
reuse throughout the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.event_publisher import EventPublisher
    from ..application.services.event_broadcaster import RoomEventBroadcaster
    from ..application.services.room_service import RoomApplicationService
    from ..domain.rooms.repository import RoomRepository
    from ..infrastructure.persistence.cleanup import RoomExpiryJob
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings

    _room_repository: RoomRepository | None = None
    _event_publisher: EventPublisher | None = None
    _broadcaster: RoomEventBroadcaster | None = None
    _room_service: RoomApplicationService | None = None
    _expiry_job: RoomExpiryJob | None = None

    # === Repositories ===

    @property
    def room_repository(self) -> RoomRepository:
        """Get the room store."""
        if self._room_repository is None:
            from ..infrastructure.persistence.room_store import InMemoryRoomStore

            self._room_repository = InMemoryRoomStore(
                code_length=self.settings.rooms.code_length,
                max_code_attempts=self.settings.rooms.max_code_attempts,
            )
        return self._room_repository

    # === Event publishing ===

    @property
    def event_publisher(self) -> EventPublisher:
        """Get the publisher: Pusher when configured, in-process fan-out otherwise."""
        if self._event_publisher is None:
            if self.settings.pusher.is_configured:
                from ..infrastructure.realtime.pusher_publisher import PusherEventPublisher

                self._event_publisher = PusherEventPublisher(self.settings.pusher)
            else:
                from ..infrastructure.realtime.local_publisher import LocalEventPublisher

                self._event_publisher = LocalEventPublisher()
            logger.info(LogTemplates.PUBLISHER_SELECTED, type(self._event_publisher).__name__)
        return self._event_publisher

    @property
    def broadcaster(self) -> RoomEventBroadcaster:
        """Get the room event broadcaster."""
        if self._broadcaster is None:
            from ..application.services.event_broadcaster import RoomEventBroadcaster

            self._broadcaster = RoomEventBroadcaster(self.event_publisher)
        return self._broadcaster

    # === Application services ===

    @property
    def room_service(self) -> RoomApplicationService:
        """Get the room application service."""
        if self._room_service is None:
            from ..application.services.room_service import RoomApplicationService

            self._room_service = RoomApplicationService(
                room_repository=self.room_repository,
                broadcaster=self.broadcaster,
                settings=self.settings.rooms,
            )
        return self._room_service

    # === Background jobs ===

    @property
    def expiry_job(self) -> RoomExpiryJob:
        """Get the room expiry job."""
        if self._expiry_job is None:
            from ..infrastructure.persistence.cleanup import RoomExpiryJob

            self._expiry_job = RoomExpiryJob(
                room_service=self.room_service,
                settings=self.settings.rooms,
            )
        return self._expiry_job

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Start background jobs. Must run inside the event loop."""
        self.expiry_job.start()

    async def shutdown(self) -> None:
        """Stop background jobs and deliver pending events."""
        if self._expiry_job is not None:
            await self._expiry_job.stop()
        if self._broadcaster is not None:
            await self._broadcaster.aclose()
        elif self._event_publisher is not None:
            await self._event_publisher.aclose()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
