"""Core domain entities for the rooms bounded context."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from jukebox_rooms.domain.shared.datetime_utils import utcnow
from jukebox_rooms.domain.shared.exceptions import (
    ForbiddenError,
    InactiveRoomError,
    NotFoundError,
)
from jukebox_rooms.domain.shared.types import (
    DisplayNameStr,
    DurationSeconds,
    OpaqueId,
    RoomCodeStr,
    SongTitleStr,
    UtcDatetimeField,
    WireModel,
)
from jukebox_rooms.domain.voting.entities import Vote, VoteLedger
from jukebox_rooms.domain.voting.services import QueueRankingService
from jukebox_rooms.domain.voting.value_objects import VoteDirection


class Participant(WireModel):
    """Immutable value object for a room member's public identity."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: OpaqueId
    name: DisplayNameStr
    avatar: str | None = None
    joined_at: UtcDatetimeField = Field(default_factory=utcnow)


class Song(WireModel):
    """Immutable value object for a queued song.

    Its rank is derived from the room's votes and never stored on the song.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: OpaqueId
    title: SongTitleStr
    artist: SongTitleStr
    album_art: str | None = None
    duration: DurationSeconds = 0
    spotify_id: str | None = None
    added_by: OpaqueId
    added_at: UtcDatetimeField = Field(default_factory=utcnow)


class Room(BaseModel):
    """Aggregate root for one voting session.

    Invariants:
    - ``is_active`` is true from creation until the creator leaves or the
      room empties, and never turns back to true.
    - Every song id in the vote ledger belongs to a song added to ``queue``.
    """

    model_config = ConfigDict(strict=True)

    code: RoomCodeStr
    name: DisplayNameStr
    created_by: OpaqueId
    created_at: UtcDatetimeField = Field(default_factory=utcnow)
    participants: dict[str, Participant] = Field(default_factory=dict)
    queue: list[Song] = Field(default_factory=list)
    votes: VoteLedger = Field(default_factory=VoteLedger)
    # Reserved: no operation advances playback yet.
    current_song: Song | None = None
    is_active: bool = True

    @classmethod
    def open(cls, code: str, name: str, creator: Participant, created_at: datetime) -> Room:
        """Create an active room whose only member is its creator."""
        return cls(
            code=code,
            name=name,
            created_by=creator.id,
            created_at=created_at,
            participants={creator.id: creator},
        )

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    def ensure_member(self, participant_id: str) -> Participant:
        """Return the member or raise ``ForbiddenError`` for outsiders."""
        participant = self.participants.get(participant_id)
        if participant is None:
            raise ForbiddenError(participant_id=participant_id, room_code=self.code)
        return participant

    def ensure_active(self) -> None:
        if not self.is_active:
            raise InactiveRoomError(room_code=self.code)

    def add_participant(self, participant: Participant) -> None:
        self.ensure_active()
        self.participants[participant.id] = participant

    def remove_participant(self, participant_id: str) -> Participant:
        """Remove a member and every vote they cast.

        Deactivates the room when the creator leaves or nobody is left.

        Raises:
            NotFoundError: If the participant is not in the room.
        """
        participant = self.participants.pop(participant_id, None)
        if participant is None:
            raise NotFoundError("Participant", participant_id)

        self.votes.remove_participant_votes(participant_id)

        if not self.participants or participant_id == self.created_by:
            self.deactivate()
        return participant

    def add_song(self, song: Song) -> None:
        self.ensure_active()
        self.queue.append(song)
        self.votes.open_song(song.id)

    def cast_vote(
        self,
        participant_id: str,
        song_id: str,
        direction: VoteDirection,
        at: datetime | None = None,
    ) -> Vote:
        """Record a member's vote on a queued song.

        Raises:
            NotFoundError: If the song was never added to this room.
        """
        self.ensure_active()
        if not self.votes.has_song(song_id):
            raise NotFoundError("Song", song_id)
        return self.votes.cast_vote(song_id, participant_id, direction, at=at)

    def score(self, song_id: str) -> int:
        return self.votes.score(song_id)

    def ranked_queue(self) -> list[Song]:
        return QueueRankingService.rank(self.queue, self.votes)

    def deactivate(self) -> None:
        self.is_active = False

    def age(self, now: datetime) -> timedelta:
        return now - self.created_at

    def is_expired(self, now: datetime, retention: timedelta) -> bool:
        """Whether the expiry sweep should remove this room."""
        return not self.is_active or self.age(now) > retention
