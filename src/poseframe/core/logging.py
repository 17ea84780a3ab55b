"""Structured logging for poseframe.

Console output goes to stderr so that command output on stdout stays
machine-readable. An optional JSON lines file captures the same records.
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, TextIO

PACKAGE_LOGGER = "poseframe"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as one JSON object."""
        entry = {
            "timestamp": time.time(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        data = getattr(record, "frame_data", None)
        if data:
            entry.update(data)
        return json.dumps(entry, default=str)


def setup_logging(
    log_path: Path | None = None,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        log_path: Optional path for a JSON lines log file
        level: Logging level
        stream: Console stream (default: stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> "StructuredLogger":
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return StructuredLogger(logging.getLogger(name))


class StructuredLogger:
    """Wrapper attaching a dict of structured fields to log records."""

    def __init__(self, logger: logging.Logger):
        """Wrap a standard library logger."""
        self.logger = logger

    def _log(self, level: int, msg: str, data: dict[str, Any] | None = None) -> None:
        """Log with structured fields when the level is enabled."""
        if not self.logger.isEnabledFor(level):
            return
        extra = {"frame_data": data} if data else {}
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, data: dict[str, Any] | None = None) -> None:
        """Debug level log."""
        self._log(logging.DEBUG, msg, data)

    def info(self, msg: str, data: dict[str, Any] | None = None) -> None:
        """Info level log."""
        self._log(logging.INFO, msg, data)

    def warning(self, msg: str, data: dict[str, Any] | None = None) -> None:
        """Warning level log."""
        self._log(logging.WARNING, msg, data)

    def error(self, msg: str, data: dict[str, Any] | None = None) -> None:
        """Error level log."""
        self._log(logging.ERROR, msg, data)


__all__ = [
    "PACKAGE_LOGGER",
    "JSONFormatter",
    "setup_logging",
    "get_logger",
    "StructuredLogger",
]
