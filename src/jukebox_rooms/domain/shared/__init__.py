"""
Shared Domain Kernel

Contains constrained types, messages and exceptions shared across all bounded contexts.
"""

from jukebox_rooms.domain.shared.exceptions import (
    DomainError,
    ForbiddenError,
    InactiveRoomError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "InactiveRoomError",
]
