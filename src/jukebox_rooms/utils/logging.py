"""Colored logging formatter for console output."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any


class ColoredFormatter(logging.Formatter):
    """Logging formatter that applies ANSI color codes to the levelname field.

    ``logging_config.json`` builds it through a ``"()"`` factory entry, passing
    ``fmt``, ``datefmt`` and the same ``stream`` its handler writes to. Colors
    are disabled when ``NO_COLOR`` is set or that stream is not a TTY.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, *args: Any, stream: IO[str] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        """Stream whose TTY status decides coloring (stderr unless configured)."""
        return self._stream if self._stream is not None else sys.stderr

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self._use_color():
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{self.COLORS.get(record.levelno, '')}{record.levelname}{self.RESET}"
        return super().format(colored)
