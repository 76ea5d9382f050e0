"""
Voting Bounded Context

Domain logic for up/down votes on queued songs and the queue ranking they produce.
"""

from jukebox_rooms.domain.voting.entities import Vote, VoteLedger
from jukebox_rooms.domain.voting.services import QueueRankingService
from jukebox_rooms.domain.voting.value_objects import VoteDirection

__all__ = [
    # Entities
    "Vote",
    "VoteLedger",
    # Value Objects
    "VoteDirection",
    # Services
    "QueueRankingService",
]
