"""
Voting Domain Services

Domain services containing queue ranking rules.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jukebox_rooms.domain.rooms.entities import Song
    from jukebox_rooms.domain.voting.entities import VoteLedger


class QueueRankingService:
    """Domain service ordering a room's queue by its votes.

    Songs are ranked by descending score. Ties keep the order the songs have
    in the queue, so among equally voted songs the earlier addition comes first.
    """

    @classmethod
    def score_map(cls, queue: Sequence[Song], ledger: VoteLedger) -> dict[str, int]:
        """Score every song in the queue.

        Args:
            queue: Songs in insertion order.
            ledger: The room's vote ledger.

        Returns:
            Mapping of song id to score.
        """
        return {song.id: ledger.score(song.id) for song in queue}

    @classmethod
    def rank(cls, queue: Sequence[Song], ledger: VoteLedger) -> list[Song]:
        """Return a new list of the queue's songs in rank order.

        Neither ``queue`` nor ``ledger`` is modified. ``sorted`` is stable,
        which provides the insertion-order tie-break.

        Args:
            queue: Songs in insertion order.
            ledger: The room's vote ledger.

        Returns:
            The songs sorted by descending score.
        """
        scores = cls.score_map(queue, ledger)
        return sorted(queue, key=lambda song: -scores[song.id])
