"""Date/time helpers.

- Always store and operate on timezone-aware UTC datetimes.
- Clocks are plain zero-argument callables so tests can pin "now".
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Preferred replacement for `datetime.now(UTC)`.

    Returns a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)
