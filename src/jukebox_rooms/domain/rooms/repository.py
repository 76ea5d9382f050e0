"""
Rooms Domain Repository Interfaces

Abstract base classes defining the contracts for room storage.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from jukebox_rooms.domain.rooms.entities import Room


class RoomRepository(ABC):
    """Abstract store of Room aggregates and the participant-to-room index.

    The store is the single owner of every Room. Mutations go through
    :meth:`locked`, which serialises all work on one room while leaving
    other rooms free to proceed.
    """

    @abstractmethod
    async def insert_new(self, build_room: Callable[[str], Room]) -> Room:
        """Allocate an unused room code, build a room with it and store it.

        Args:
            build_room: Factory receiving the allocated code.

        Returns:
            The stored room.

        Raises:
            RuntimeError: If no free code could be found.
        """
        ...

    @abstractmethod
    def locked(self, room_code: str) -> AbstractAsyncContextManager[Room]:
        """Hold a room's lock and yield the live aggregate.

        Args:
            room_code: Normalised room code.

        Raises:
            NotFoundError: If the room does not exist, including when it was
                removed while the caller waited for the lock.
        """
        ...

    @abstractmethod
    async def delete(self, room_code: str) -> Room | None:
        """Remove a room and release the index entries of its participants.

        Must be called while holding the room's lock.

        Args:
            room_code: Normalised room code.

        Returns:
            The removed room, or None if it did not exist.
        """
        ...

    @abstractmethod
    async def index_participant(self, participant_id: str, room_code: str) -> None:
        """Record which room a participant belongs to."""
        ...

    @abstractmethod
    async def unindex_participant(self, participant_id: str) -> None:
        """Forget a participant's room membership."""
        ...

    @abstractmethod
    async def room_code_for(self, participant_id: str) -> str | None:
        """Look up the room a participant belongs to.

        Returns:
            The room code, or None if the participant is unknown.
        """
        ...

    @abstractmethod
    async def codes(self) -> list[str]:
        """Codes of all stored rooms."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored rooms."""
        ...
