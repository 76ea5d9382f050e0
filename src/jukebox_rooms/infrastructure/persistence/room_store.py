"""In-memory implementation of the room repository."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from jukebox_rooms.domain.rooms.entities import Room
from jukebox_rooms.domain.rooms.repository import RoomRepository
from jukebox_rooms.domain.rooms.value_objects import DEFAULT_CODE_LENGTH, generate_room_code
from jukebox_rooms.domain.shared.exceptions import NotFoundError
from jukebox_rooms.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class InMemoryRoomStore(RoomRepository):
    """Process-local room store.

    Each room has its own ``asyncio.Lock``; the registry lock only guards
    code allocation and removal, so work on different rooms never waits on
    each other.
    """

    def __init__(
        self,
        *,
        code_length: int = DEFAULT_CODE_LENGTH,
        max_code_attempts: int = 100,
        code_generator: Callable[[int], str] = generate_room_code,
    ) -> None:
        self._code_length = code_length
        self._max_code_attempts = max_code_attempts
        self._generate_code = code_generator
        self._rooms: dict[str, Room] = {}
        self._room_locks: dict[str, asyncio.Lock] = {}
        self._participant_rooms: dict[str, str] = {}
        self._registry_lock = asyncio.Lock()

    async def insert_new(self, build_room: Callable[[str], Room]) -> Room:
        async with self._registry_lock:
            code = self._allocate_code()
            room = build_room(code)
            self._rooms[code] = room
            self._room_locks[code] = asyncio.Lock()
            for participant_id in room.participants:
                self._participant_rooms[participant_id] = code
            return room

    def _allocate_code(self) -> str:
        for _ in range(self._max_code_attempts):
            code = self._generate_code(self._code_length)
            if code not in self._rooms:
                return code
            logger.debug(LogTemplates.ROOM_CODE_COLLISION, code)
        raise RuntimeError(
            ErrorMessages.ROOM_CODE_ALLOCATION_FAILED.format(attempts=self._max_code_attempts)
        )

    @asynccontextmanager
    async def locked(self, room_code: str) -> AsyncIterator[Room]:
        room_lock = self._room_locks.get(room_code)
        if room_lock is None:
            raise NotFoundError("Room", room_code)

        async with room_lock:
            # The room may have been swept while we were waiting, and its
            # code handed to a new room with a fresh lock.
            room = self._rooms.get(room_code)
            if room is None or self._room_locks.get(room_code) is not room_lock:
                raise NotFoundError("Room", room_code)
            yield room

    async def delete(self, room_code: str) -> Room | None:
        async with self._registry_lock:
            room = self._rooms.pop(room_code, None)
            self._room_locks.pop(room_code, None)
            if room is None:
                return None
            for participant_id in room.participants:
                if self._participant_rooms.get(participant_id) == room_code:
                    del self._participant_rooms[participant_id]
            return room

    async def index_participant(self, participant_id: str, room_code: str) -> None:
        self._participant_rooms[participant_id] = room_code

    async def unindex_participant(self, participant_id: str) -> None:
        self._participant_rooms.pop(participant_id, None)

    async def room_code_for(self, participant_id: str) -> str | None:
        return self._participant_rooms.get(participant_id)

    async def codes(self) -> list[str]:
        return list(self._rooms)

    async def count(self) -> int:
        return len(self._rooms)

    @property
    def indexed_participants(self) -> int:
        return len(self._participant_rooms)
