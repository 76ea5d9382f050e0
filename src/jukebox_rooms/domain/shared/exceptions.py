"""Base exception classes for domain-level errors."""

from __future__ import annotations

from jukebox_rooms.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a request carries malformed or missing input."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class NotFoundError(DomainError):
    """Raised when a requested room, participant or song does not exist."""

    def __init__(self, entity_type: str, identifier: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.ENTITY_NOT_FOUND.format(
            entity_type=entity_type, identifier=identifier
        )
        super().__init__(msg, code="NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class ForbiddenError(DomainError):
    """Raised when a well-formed request comes from someone outside the room."""

    def __init__(self, participant_id: str, room_code: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.NOT_A_PARTICIPANT
        super().__init__(msg, code="FORBIDDEN")
        self.participant_id = participant_id
        self.room_code = room_code


class InactiveRoomError(DomainError):
    """Raised when joining or mutating a room that is no longer active."""

    def __init__(self, room_code: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.ROOM_INACTIVE
        super().__init__(msg, code="ROOM_INACTIVE")
        self.room_code = room_code
