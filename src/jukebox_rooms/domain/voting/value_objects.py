"""
Voting Domain Value Objects

Immutable value objects for the voting bounded context.
"""

from __future__ import annotations

from enum import Enum

from jukebox_rooms.domain.shared.exceptions import ValidationError
from jukebox_rooms.domain.shared.messages import ErrorMessages


class VoteDirection(Enum):
    """Direction of a vote on a queued song."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of this vote to a song's score."""
        return 1 if self is VoteDirection.UP else -1

    @classmethod
    def parse(cls, value: object) -> VoteDirection:
        """Parse caller input (``"up"`` / ``"down"`` or a member) into a direction.

        Raises:
            ValidationError: If the value is not a known direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ValidationError(ErrorMessages.INVALID_VOTE_DIRECTION, field="vote")
