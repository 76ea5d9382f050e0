"""
Tests for ColoredFormatter and its wiring through logging_config.json.

Tests for:
- The console handler built by setup_logging from the shipped config
- Level coloring driven by the configured stream and NO_COLOR
"""

import logging
import re
from io import StringIO

import pytest

from jukebox_rooms.main import setup_logging
from jukebox_rooms.utils.logging import ColoredFormatter

RESET = "\033[0m"
FMT = "%(levelname)s | %(message)s"


class _TtyStream(StringIO):
    def isatty(self) -> bool:
        return True


def _make_record(level: int = logging.INFO, message: str = "room created") -> logging.LogRecord:
    return logging.LogRecord(
        name="jukebox_rooms.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _color_allowed(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def configured_root():
    """Root logger after setup_logging applied logging_config.json; undone afterwards."""
    root = logging.getLogger()
    before, level = list(root.handlers), root.level

    setup_logging("INFO")
    yield root

    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
    for name in ("pusher", "urllib3", "asyncio"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def _console_handler(root: logging.Logger) -> logging.StreamHandler:
    handlers = [h for h in root.handlers if isinstance(h.formatter, ColoredFormatter)]
    assert len(handlers) == 1
    return handlers[0]


class TestShippedConfig:
    """setup_logging builds the console handler from logging_config.json."""

    def test_console_handler_uses_colored_formatter(self, configured_root):
        handler = _console_handler(configured_root)

        assert isinstance(handler, logging.StreamHandler)

    def test_formatter_watches_handler_stream(self, configured_root):
        """Color decisions follow the stream the handler actually writes to."""
        handler = _console_handler(configured_root)

        assert handler.formatter.stream is handler.stream

    def test_line_layout(self, configured_root, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        formatter = _console_handler(configured_root).formatter

        line = formatter.format(_make_record())

        assert re.fullmatch(
            r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| INFO     \| jukebox_rooms\.test \| room created",
            line,
        )

    def test_transport_loggers_quietened(self, configured_root):
        for name in ("pusher", "urllib3", "asyncio"):
            assert logging.getLogger(name).level == logging.WARNING

    def test_root_level(self, configured_root):
        assert configured_root.level == logging.INFO


class TestColoring:
    @pytest.mark.parametrize("level", sorted(ColoredFormatter.COLORS))
    def test_color_per_level_on_tty(self, level: int):
        output = ColoredFormatter(FMT, stream=_TtyStream()).format(_make_record(level))

        assert output.startswith(ColoredFormatter.COLORS[level])
        assert RESET in output

    def test_plain_when_stream_not_tty(self):
        output = ColoredFormatter(FMT, stream=StringIO()).format(_make_record(logging.ERROR))

        assert output == "ERROR | room created"

    def test_no_color_env_wins_over_tty(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

        output = ColoredFormatter(FMT, stream=_TtyStream()).format(_make_record())

        assert output == "INFO | room created"

    def test_record_left_untouched(self):
        record = _make_record(logging.WARNING)

        ColoredFormatter(FMT, stream=_TtyStream()).format(record)

        assert record.levelname == "WARNING"
