"""Core domain entities for the voting bounded context."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from jukebox_rooms.domain.shared.datetime_utils import utcnow
from jukebox_rooms.domain.shared.types import OpaqueId, UtcDatetimeField, WireModel
from jukebox_rooms.domain.voting.value_objects import VoteDirection


class Vote(WireModel):
    """Immutable value object representing one participant's vote on one song."""

    model_config = ConfigDict(frozen=True, strict=True)

    participant_id: OpaqueId
    song_id: OpaqueId
    direction: VoteDirection = Field(alias="vote")
    timestamp: UtcDatetimeField = Field(default_factory=utcnow)

    @property
    def weight(self) -> int:
        return self.direction.weight


class VoteLedger(BaseModel):
    """Votes of a single room, keyed by song id.

    Holds at most one vote per (participant, song) pair: a new vote from the
    same participant on the same song replaces the previous one.
    """

    model_config = ConfigDict(strict=True)

    votes: dict[str, list[Vote]] = Field(default_factory=dict)

    def open_song(self, song_id: str) -> None:
        """Start an empty vote list for a newly queued song."""
        self.votes.setdefault(song_id, [])

    def has_song(self, song_id: str) -> bool:
        return song_id in self.votes

    def cast_vote(
        self,
        song_id: str,
        participant_id: str,
        direction: VoteDirection,
        at: datetime | None = None,
    ) -> Vote:
        """Record a vote, replacing any earlier vote by the same participant on that song."""
        song_votes = [v for v in self.votes.get(song_id, []) if v.participant_id != participant_id]
        vote = Vote(
            participant_id=participant_id,
            song_id=song_id,
            direction=direction,
            timestamp=at or utcnow(),
        )
        song_votes.append(vote)
        self.votes[song_id] = song_votes
        return vote

    def score(self, song_id: str) -> int:
        """Up votes minus down votes; 0 for a song nobody voted on."""
        return sum(vote.weight for vote in self.votes.get(song_id, []))

    def votes_for(self, song_id: str) -> list[Vote]:
        return list(self.votes.get(song_id, []))

    def remove_participant_votes(self, participant_id: str) -> int:
        """Delete every vote cast by a participant. Returns the number removed."""
        removed = 0
        for song_id, song_votes in self.votes.items():
            kept = [v for v in song_votes if v.participant_id != participant_id]
            removed += len(song_votes) - len(kept)
            self.votes[song_id] = kept
        return removed
