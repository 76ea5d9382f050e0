"""Room Application Service - room lifecycle, queue and vote operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from ...domain.rooms.entities import Participant, Room, Song
from ...domain.rooms.events import ParticipantJoined, ParticipantLeft, QueueUpdated, VoteUpdated
from ...domain.rooms.value_objects import normalize_room_code
from ...domain.shared.datetime_utils import Clock, utcnow
from ...domain.shared.exceptions import NotFoundError
from ...domain.shared.messages import LogTemplates
from ...domain.shared.validators import optional_text, require_text, validate_model
from ...domain.voting.value_objects import VoteDirection
from .room_models import (
    AddSongResult,
    CastVoteResult,
    CreateRoomResult,
    JoinRoomResult,
    LeaveRoomResult,
    RoomState,
    SongRequest,
    SweepStats,
)

if TYPE_CHECKING:
    from ...config.settings import RoomSettings
    from ...domain.rooms.repository import RoomRepository
    from .event_broadcaster import RoomEventBroadcaster

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


def _new_id() -> str:
    return str(uuid4())


class RoomApplicationService:
    """Creates, joins, mutates, and expires rooms.

    Every operation on an existing room runs under that room's lock. State
    is changed first; the resulting event is then handed to the broadcaster,
    whose delivery outcome never affects the operation's result.
    """

    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        broadcaster: RoomEventBroadcaster,
        settings: RoomSettings,
        clock: Clock = utcnow,
    ) -> None:
        self._rooms = room_repository
        self._broadcaster = broadcaster
        self._settings = settings
        self._clock = clock

    @property
    def retention(self) -> timedelta:
        return timedelta(hours=self._settings.retention_hours)

    async def create_room(
        self, room_name: str, creator_name: str, creator_avatar: str | None = None
    ) -> CreateRoomResult:
        name = require_text(room_name, "Room name", MAX_NAME_LENGTH)
        creator = Participant(
            id=_new_id(),
            name=require_text(creator_name, "Creator name", MAX_NAME_LENGTH),
            avatar=optional_text(creator_avatar, "avatar"),
            joined_at=self._clock(),
        )

        room = await self._rooms.insert_new(
            lambda code: Room.open(code, name, creator, created_at=creator.joined_at)
        )
        logger.info(LogTemplates.ROOM_CREATED, room.code, room.name, creator.id)

        return CreateRoomResult(
            room_code=room.code,
            participant_id=creator.id,
            room=RoomState.from_room(room),
        )

    async def join_room(
        self, room_code: str, name: str, avatar: str | None = None
    ) -> JoinRoomResult:
        display_name = require_text(name, "Name", MAX_NAME_LENGTH)
        avatar = optional_text(avatar, "avatar")
        code = normalize_room_code(room_code)

        async with self._rooms.locked(code) as room:
            room.ensure_active()
            participant = Participant(
                id=_new_id(), name=display_name, avatar=avatar, joined_at=self._clock()
            )
            room.add_participant(participant)
            await self._rooms.index_participant(participant.id, code)

            state = RoomState.from_room(room)
            self._broadcaster.emit(
                ParticipantJoined(
                    room_code=code,
                    participant=participant,
                    total_participants=room.participant_count,
                )
            )

        logger.info(LogTemplates.PARTICIPANT_JOINED, participant.id, code, state.participant_count)
        return JoinRoomResult(participant_id=participant.id, room=state)

    async def add_song(
        self,
        room_code: str,
        participant_id: str,
        song: SongRequest | Mapping[str, Any],
    ) -> AddSongResult:
        request = validate_model(SongRequest, song)
        code = normalize_room_code(room_code)

        async with self._rooms.locked(code) as room:
            member = room.ensure_member(participant_id)
            room.ensure_active()

            new_song = Song(
                id=_new_id(),
                title=request.title,
                artist=request.artist,
                album_art=request.album_art,
                duration=request.duration,
                spotify_id=request.spotify_id,
                added_by=member.id,
                added_at=self._clock(),
            )
            room.add_song(new_song)
            ranked = room.ranked_queue()

            self._broadcaster.emit(
                QueueUpdated(room_code=code, queue=ranked, added_song=new_song, added_by=member)
            )

        logger.info(LogTemplates.SONG_ADDED, new_song.id, new_song.title, code, member.id)
        return AddSongResult(song=new_song, queue=ranked)

    async def cast_vote(
        self,
        room_code: str,
        participant_id: str,
        song_id: str,
        direction: VoteDirection | str,
    ) -> CastVoteResult:
        vote_direction = VoteDirection.parse(direction)
        code = normalize_room_code(room_code)

        async with self._rooms.locked(code) as room:
            member = room.ensure_member(participant_id)
            room.ensure_active()

            vote = room.cast_vote(member.id, song_id, vote_direction, at=self._clock())
            ranked = room.ranked_queue()
            score = room.score(song_id)

            self._broadcaster.emit(
                VoteUpdated(
                    room_code=code,
                    song_id=song_id,
                    vote=vote,
                    participant=member,
                    song_votes=room.votes.votes_for(song_id),
                    queue=ranked,
                )
            )

        logger.info(LogTemplates.VOTE_CAST, member.id, vote_direction.value, song_id, code, score)
        return CastVoteResult(vote=vote, score=score, queue=ranked)

    async def leave_room(self, room_code: str, participant_id: str) -> LeaveRoomResult:
        code = normalize_room_code(room_code)

        async with self._rooms.locked(code) as room:
            if await self._rooms.room_code_for(participant_id) != code:
                raise NotFoundError("Participant", participant_id)

            was_active = room.is_active
            participant = room.remove_participant(participant_id)
            await self._rooms.unindex_participant(participant_id)

            self._broadcaster.emit(
                ParticipantLeft(
                    room_code=code,
                    participant_id=participant_id,
                    participant=participant,
                    total_participants=room.participant_count,
                    is_active=room.is_active,
                )
            )
            remaining = room.participant_count
            is_active = room.is_active

        logger.info(LogTemplates.PARTICIPANT_LEFT, participant_id, code, remaining, is_active)
        if was_active and not is_active:
            logger.info(LogTemplates.ROOM_DEACTIVATED, code)

        return LeaveRoomResult(
            participant_id=participant_id, total_participants=remaining, is_active=is_active
        )

    async def get_room_state(
        self, room_code: str, requesting_participant_id: str | None = None
    ) -> RoomState:
        code = normalize_room_code(room_code)

        async with self._rooms.locked(code) as room:
            if requesting_participant_id is not None:
                room.ensure_member(requesting_participant_id)
            return RoomState.from_room(room)

    async def expiry_sweep(self) -> SweepStats:
        """Remove every room that is inactive or older than the retention window.

        Emits no events: this is garbage collection, not a user-facing transition.
        """
        stats = SweepStats()
        now = self._clock()
        retention = self.retention

        for code in await self._rooms.codes():
            try:
                async with self._rooms.locked(code) as room:
                    if not room.is_expired(now, retention):
                        continue
                    await self._rooms.delete(code)
            except NotFoundError:
                continue

            logger.info(LogTemplates.ROOM_EXPIRED, code, room.is_active, room.participant_count)
            stats.rooms_removed += 1
            stats.participants_released += room.participant_count

        if stats.rooms_removed:
            logger.info(
                LogTemplates.SWEEP_COMPLETED, stats.rooms_removed, stats.participants_released
            )
        return stats
