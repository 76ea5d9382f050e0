"""Event publisher adapters."""

from jukebox_rooms.infrastructure.realtime.local_publisher import LocalEventPublisher
from jukebox_rooms.infrastructure.realtime.pusher_publisher import PusherEventPublisher

__all__ = ["LocalEventPublisher", "PusherEventPublisher"]
