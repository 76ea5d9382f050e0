"""Room domain events relayed to every subscriber of a room's channel."""

from __future__ import annotations

from typing import Any, ClassVar

from jukebox_rooms.domain.rooms.entities import Participant, Song
from jukebox_rooms.domain.rooms.value_objects import channel_key
from jukebox_rooms.domain.shared.events import DomainEvent
from jukebox_rooms.domain.shared.types import NonNegativeInt, OpaqueId, RoomCodeStr
from jukebox_rooms.domain.voting.entities import Vote

_ENVELOPE_FIELDS = {"event_id", "occurred_at", "room_code"}


class RoomEvent(DomainEvent):
    """An event scoped to one room."""

    EVENT_NAME: ClassVar[str]

    room_code: RoomCodeStr

    @property
    def channel(self) -> str:
        return channel_key(self.room_code)

    def payload(self) -> dict[str, Any]:
        """Event-specific fields in their camelCase wire form."""
        return self.model_dump(mode="json", by_alias=True, exclude=_ENVELOPE_FIELDS)


class ParticipantJoined(RoomEvent):
    EVENT_NAME: ClassVar[str] = "participant-joined"

    participant: Participant
    total_participants: NonNegativeInt


class ParticipantLeft(RoomEvent):
    EVENT_NAME: ClassVar[str] = "participant-left"

    participant_id: OpaqueId
    participant: Participant
    total_participants: NonNegativeInt
    is_active: bool


class QueueUpdated(RoomEvent):
    EVENT_NAME: ClassVar[str] = "queue-updated"

    queue: list[Song]
    added_song: Song
    added_by: Participant


class VoteUpdated(RoomEvent):
    EVENT_NAME: ClassVar[str] = "vote-updated"

    song_id: OpaqueId
    vote: Vote
    participant: Participant
    song_votes: list[Vote]
    queue: list[Song]
