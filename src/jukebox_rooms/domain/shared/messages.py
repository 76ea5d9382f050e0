"""Centralized message constants for error messages, validation, and logging."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Lookup / membership
    ENTITY_NOT_FOUND = "{entity_type} '{identifier}' not found"
    NOT_A_PARTICIPANT = "Not a participant in this room"
    ROOM_INACTIVE = "Room is no longer active"

    # Input validation (templates)
    FIELD_CANNOT_BE_EMPTY = "{field_name} cannot be empty"
    FIELD_TOO_LONG = "{field_name} cannot exceed {max_length} characters"
    INVALID_FIELD = "Invalid {field_name}: {reason}"
    INVALID_VOTE_DIRECTION = 'Vote must be "up" or "down"'

    # Room codes
    ROOM_CODE_ALLOCATION_FAILED = "Could not allocate a unique room code after {attempts} attempts"
    INVALID_CODE_LENGTH = "Room code length must be between {minimum} and {maximum}"

    # Time
    TIMEZONE_REQUIRED = "datetime must be timezone-aware (UTC)"

    # Configuration
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Room lifecycle
    ROOM_CREATED = "Room %s (%r) created by participant %s"
    PARTICIPANT_JOINED = "Participant %s joined room %s (%d participants)"
    PARTICIPANT_LEFT = "Participant %s left room %s (%d remaining, active=%s)"
    ROOM_DEACTIVATED = "Room %s deactivated"
    SONG_ADDED = "Song %s (%r) added to room %s by %s"
    VOTE_CAST = "Participant %s voted %s on song %s in room %s (score=%d)"
    ROOM_CODE_COLLISION = "Room code %s already in use, regenerating"

    # Expiry
    ROOM_EXPIRED = "Expired room %s (active=%s, participants=%d)"
    SWEEP_COMPLETED = "Expiry sweep removed %d rooms and released %d participants"
    EXPIRY_STARTED = "Room expiry job started (interval=%ds)"
    EXPIRY_STOPPED = "Room expiry job stopped"
    EXPIRY_ALREADY_RUNNING = "Room expiry job is already running"
    EXPIRY_SWEEP_FAILED = "Room expiry sweep failed"

    # Broadcasting
    EVENT_PUBLISHED = "Published %s to %s"
    EVENT_PUBLISH_FAILED = "Failed to publish %s to %s"
    NO_SUBSCRIBERS = "No subscribers on %s for %s"
    SUBSCRIBER_FAILED = "Subscriber on %s failed handling %s"
    PUSHER_CLIENT_CREATED = "Created Pusher client for cluster %s"
    PUBLISHER_SELECTED = "Using %s for room events"

    # Process
    SERVICE_STARTING = "Starting jukebox rooms service (environment=%s)"
    SERVICE_STOPPING = "Stopping jukebox rooms service"
    SERVICE_STOPPED = "Jukebox rooms service stopped"
    SERVICE_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    SERVICE_FATAL_ERROR = "Fatal error: %s"
