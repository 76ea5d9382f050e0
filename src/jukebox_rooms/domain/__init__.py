# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, messages and exceptions
- voting/: Votes, the per-room vote ledger and queue ranking
- rooms/: Rooms, participants, songs, room events and the room repository
"""

from jukebox_rooms.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
