"""Base type for domain events."""

from __future__ import annotations

from uuid import uuid4

from pydantic import ConfigDict, Field

from jukebox_rooms.domain.shared.datetime_utils import utcnow
from jukebox_rooms.domain.shared.types import NonEmptyStr, UtcDatetimeField, WireModel


class DomainEvent(WireModel):
    """Base class for all domain events."""

    model_config = ConfigDict(frozen=True)

    event_id: NonEmptyStr = Field(default_factory=lambda: str(uuid4()))
    occurred_at: UtcDatetimeField = Field(default_factory=utcnow)
