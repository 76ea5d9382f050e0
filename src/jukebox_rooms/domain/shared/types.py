"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across bounded contexts is defined here once,
so models can simply annotate their fields::

    from jukebox_rooms.domain.shared.types import DisplayNameStr, OpaqueId

    class MyModel(BaseModel):
        id: OpaqueId
        name: DisplayNameStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from jukebox_rooms.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Song duration in seconds: 0 … 86 400 (24 hours)."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

OpaqueId = Annotated[str, Field(min_length=1, max_length=64)]
"""Participant / song identifier (uuid4 string)."""

DisplayNameStr = Annotated[str, Field(min_length=1, max_length=100)]
"""Room or participant display name: 1-100 characters."""

SongTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Song title or artist: 1-500 characters."""

RoomCodeStr = Annotated[str, Field(pattern=r"^[A-Z0-9]{4,12}$")]
"""Upper-case alphanumeric room code."""


# ── Datetime constraints ────────────────────────────────────────────


def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError(ErrorMessages.TIMEZONE_REQUIRED)
    return v.astimezone(UTC)


def _to_epoch_millis(v: datetime) -> int:
    return int(v.timestamp() * 1000)


UtcDatetimeField = Annotated[
    datetime,
    BeforeValidator(_ensure_utc),
    PlainSerializer(_to_epoch_millis, return_type=int, when_used="json"),
]
"""Timezone-aware datetime, normalised to UTC on input; epoch milliseconds on the wire."""


# ── Wire models ─────────────────────────────────────────────────────


class WireModel(BaseModel):
    """Base for models that travel to clients: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
