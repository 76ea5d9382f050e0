"""Request and result models for the room application service."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from ...domain.rooms.entities import Participant, Room, Song
from ...domain.shared.types import (
    DurationSeconds,
    NonNegativeInt,
    OpaqueId,
    RoomCodeStr,
    SongTitleStr,
    UtcDatetimeField,
    WireModel,
)
from ...domain.voting.entities import Vote
from ...domain.voting.services import QueueRankingService


class SongRequest(WireModel):
    """Song fields supplied by the participant adding it."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: SongTitleStr
    artist: SongTitleStr
    album_art: str | None = None
    duration: DurationSeconds = 0
    spotify_id: str | None = None


class VoteView(Vote):
    """A vote annotated with the voter's public identity."""

    participant: Participant | None = None


class RankedSong(Song):
    """A queued song with its current score and votes."""

    score: int = 0
    votes: list[VoteView] = Field(default_factory=list)


class RoomState(WireModel):
    """Read-only snapshot of a room, queue freshly ranked at snapshot time.

    The room code goes out as ``id`` on the wire, the key clients address
    the room by.
    """

    code: RoomCodeStr = Field(serialization_alias="id")
    name: str
    created_by: OpaqueId
    created_at: UtcDatetimeField
    participants: list[Participant]
    queue: list[RankedSong]
    current_song: Song | None = None
    is_active: bool

    @classmethod
    def from_room(cls, room: Room) -> RoomState:
        scores = QueueRankingService.score_map(room.queue, room.votes)
        queue = [
            RankedSong(
                **song.model_dump(),
                score=scores[song.id],
                votes=[
                    VoteView(
                        **vote.model_dump(),
                        participant=room.participants.get(vote.participant_id),
                    )
                    for vote in room.votes.votes_for(song.id)
                ],
            )
            for song in QueueRankingService.rank(room.queue, room.votes)
        ]
        return cls(
            code=room.code,
            name=room.name,
            created_by=room.created_by,
            created_at=room.created_at,
            participants=list(room.participants.values()),
            queue=queue,
            current_song=room.current_song,
            is_active=room.is_active,
        )

    @property
    def participant_count(self) -> int:
        return len(self.participants)


class CreateRoomResult(WireModel):
    room_code: RoomCodeStr
    participant_id: OpaqueId
    room: RoomState


class JoinRoomResult(WireModel):
    participant_id: OpaqueId
    room: RoomState


class AddSongResult(WireModel):
    song: Song
    queue: list[Song]


class CastVoteResult(WireModel):
    vote: Vote
    score: int
    queue: list[Song]


class LeaveRoomResult(WireModel):
    participant_id: OpaqueId
    total_participants: NonNegativeInt
    is_active: bool


class SweepStats(WireModel):
    rooms_removed: NonNegativeInt = 0
    participants_released: NonNegativeInt = 0
