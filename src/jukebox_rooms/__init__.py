"""Jukebox Rooms: collaborative, vote-ranked song queues in ephemeral rooms."""

__version__ = "0.1.0"
