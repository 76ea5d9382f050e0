"""Immutable value objects and helpers for the rooms bounded context."""

from __future__ import annotations

import secrets
import string

from jukebox_rooms.domain.shared.messages import ErrorMessages
from jukebox_rooms.domain.shared.validators import require_text

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits
MIN_CODE_LENGTH = 4
MAX_CODE_LENGTH = 12
DEFAULT_CODE_LENGTH = 6

CHANNEL_PREFIX = "room-"


def generate_room_code(length: int = DEFAULT_CODE_LENGTH) -> str:
    """Generate a random, human-typeable, upper-case room code."""
    if not MIN_CODE_LENGTH <= length <= MAX_CODE_LENGTH:
        raise ValueError(
            ErrorMessages.INVALID_CODE_LENGTH.format(
                minimum=MIN_CODE_LENGTH, maximum=MAX_CODE_LENGTH
            )
        )
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(length))


def normalize_room_code(value: object) -> str:
    """Normalise user-typed room codes: surrounding whitespace removed, upper-cased."""
    return require_text(value, "room code").upper()


def channel_key(room_code: str) -> str:
    """Broadcast channel for a room, e.g. ``room-AB12CD``."""
    return f"{CHANNEL_PREFIX}{room_code}"
