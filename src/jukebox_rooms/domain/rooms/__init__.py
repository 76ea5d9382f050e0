"""
Rooms Bounded Context

Domain logic for rooms, their members and song queue, and the events they emit.
"""

from jukebox_rooms.domain.rooms.entities import Participant, Room, Song
from jukebox_rooms.domain.rooms.events import (
    ParticipantJoined,
    ParticipantLeft,
    QueueUpdated,
    RoomEvent,
    VoteUpdated,
)
from jukebox_rooms.domain.rooms.repository import RoomRepository
from jukebox_rooms.domain.rooms.value_objects import (
    channel_key,
    generate_room_code,
    normalize_room_code,
)

__all__ = [
    # Entities
    "Participant",
    "Song",
    "Room",
    # Events
    "RoomEvent",
    "ParticipantJoined",
    "ParticipantLeft",
    "QueueUpdated",
    "VoteUpdated",
    # Repository
    "RoomRepository",
    # Helpers
    "channel_key",
    "generate_room_code",
    "normalize_room_code",
]
