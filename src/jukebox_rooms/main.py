#!/usr/bin/env python3
"""Main entry point for the jukebox rooms service."""

from __future__ import annotations

import asyncio
import json
import logging
import logging.config
import signal
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from jukebox_rooms.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from jukebox_rooms.config.container import Container

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(
            "Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH
        )
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


async def serve(container: Container, stop_event: asyncio.Event | None = None) -> None:
    """Run background jobs until ``stop_event`` is set or SIGINT/SIGTERM arrives."""
    stop_event = stop_event or asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except (NotImplementedError, RuntimeError):
            # Signal handlers are unavailable off the main thread and on Windows.
            pass

    await container.initialize()
    try:
        await stop_event.wait()
    finally:
        logging.getLogger(__name__).info(LogTemplates.SERVICE_STOPPING)
        await container.shutdown()


def main() -> int:
    from jukebox_rooms.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.SERVICE_STARTING, settings.environment)

    from jukebox_rooms.config.container import create_container

    container = create_container(settings)

    try:
        asyncio.run(serve(container))
        logger.info(LogTemplates.SERVICE_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.SERVICE_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.SERVICE_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
