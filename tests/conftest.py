from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from jukebox_rooms.application.interfaces.event_publisher import EventPublisher

# ============================================================================
# Test Doubles
# ============================================================================


class FakeClock:
    """Settable clock: call it to read "now", advance it to move time forward."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingPublisher(EventPublisher):
    """Publisher that records every call; can be told to fail."""

    def __init__(self) -> None:
        self.published: list[tuple[str, str, dict[str, Any]]] = []
        self.fail_with: Exception | None = None
        self.closed = False

    async def publish(self, channel: str, event_name: str, payload: dict[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.published.append((channel, event_name, payload))

    async def aclose(self) -> None:
        self.closed = True

    def names(self) -> list[str]:
        return [name for _, name, _ in self.published]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def clock():
    """A clock pinned to 2024-06-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def room_settings():
    from jukebox_rooms.config.settings import RoomSettings

    return RoomSettings()


@pytest.fixture
def room_store(room_settings):
    from jukebox_rooms.infrastructure.persistence.room_store import InMemoryRoomStore

    return InMemoryRoomStore(code_length=room_settings.code_length)


@pytest.fixture
def broadcaster(publisher):
    from jukebox_rooms.application.services.event_broadcaster import RoomEventBroadcaster

    return RoomEventBroadcaster(publisher)


@pytest.fixture
def room_service(room_store, broadcaster, room_settings, clock):
    from jukebox_rooms.application.services.room_service import RoomApplicationService

    return RoomApplicationService(
        room_repository=room_store,
        broadcaster=broadcaster,
        settings=room_settings,
        clock=clock,
    )


@pytest.fixture
def alice():
    from jukebox_rooms.domain.rooms.entities import Participant

    return Participant(id="alice-id", name="Alice", joined_at=datetime(2024, 6, 1, tzinfo=UTC))


@pytest.fixture
def bob():
    from jukebox_rooms.domain.rooms.entities import Participant

    return Participant(id="bob-id", name="Bob", joined_at=datetime(2024, 6, 1, tzinfo=UTC))


@pytest.fixture
def sample_room(alice, bob):
    """Active room created by Alice with Bob as a second member."""
    from jukebox_rooms.domain.rooms.entities import Room

    room = Room.open("PARTY1", "Party", alice, created_at=datetime(2024, 6, 1, tzinfo=UTC))
    room.add_participant(bob)
    return room


def make_song(song_id: str, title: str = "Song", added_by: str = "alice-id"):
    from jukebox_rooms.domain.rooms.entities import Song

    return Song(
        id=song_id,
        title=title,
        artist="Artist",
        duration=180,
        added_by=added_by,
        added_at=datetime(2024, 6, 1, tzinfo=UTC),
    )
