"""Ports implemented by infrastructure adapters."""

from jukebox_rooms.application.interfaces.event_publisher import EventPublisher

__all__ = ["EventPublisher"]
