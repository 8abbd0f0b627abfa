"""Console logging setup with colored level names."""

from __future__ import annotations

import logging
import os
import sys

from ..domain.shared.constants import ConfigKeys
from ..domain.shared.messages import LogTemplates

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the levelname on interactive terminals.

    Colors are off when ``NO_COLOR`` is set or the stream is not a TTY.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",     # cyan
        logging.INFO: "\033[32m",      # green
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, stream=None) -> None:
        super().__init__(fmt, datefmt)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get(ConfigKeys.NO_COLOR) is not None:
            return False
        stream = self._stream or sys.stdout
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self._use_color():
            color = self.COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(log_level: str = "INFO", stream=None) -> logging.Handler:
    """Install a colored console handler on the root logger and return it."""
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream or sys.stdout

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT, stream=stream))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_playback_queue", False):
            root.removeHandler(existing)
    handler._playback_queue = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(resolved_level)

    logging.getLogger(__name__).debug(
        LogTemplates.LOGGING_CONFIGURED, logging.getLevelName(resolved_level)
    )
    return handler
