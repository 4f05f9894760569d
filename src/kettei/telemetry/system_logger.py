"""System logger for operational events.

This module provides a singleton system logger for events that callers may
want to see but that are not decisions themselves (voter failures, invalid
strategy, per-decision debug traces).

Logging strategy:
- Console (stderr): WARNING and above by default, raised via set_console_level()
- File (JSONL): added via configure_system_logger_file() once a path is known
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]

import logging
import sys
from pathlib import Path

from kettei.constants import SYSTEM_LOGGER_NAME
from kettei.utils.logging.logger_setup import create_jsonl_handler


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts 'message' or 'event' field from dict messages for cleaner stderr output.
    """

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            return f"{record.levelname}: {msg}"
        return f"{record.levelname}: {record.getMessage()}"


_system_logger: logging.Logger | None = None
_stderr_handler: logging.Handler | None = None
_file_handler: logging.FileHandler | None = None


def get_system_logger() -> logging.Logger:
    """Get the singleton system logger instance.

    Creates the logger on first call with a stderr handler only.

    Returns:
        logging.Logger: Configured system logger instance.

    Example:
        >>> logger = get_system_logger()
        >>> logger.warning({"event": "voter_failed", "message": "..."})
    """
    global _system_logger, _stderr_handler

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(SYSTEM_LOGGER_NAME)
    _system_logger.setLevel(logging.DEBUG)
    _system_logger.propagate = False

    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    _stderr_handler = logging.StreamHandler(sys.stderr)
    _stderr_handler.setLevel(logging.WARNING)
    _stderr_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(_stderr_handler)

    return _system_logger


def set_console_level(level: int | str) -> None:
    """Change the minimum level printed to stderr.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG").
    """
    get_system_logger()
    if _stderr_handler is not None:
        _stderr_handler.setLevel(level)


def configure_system_logger_file(log_path: Path, log_level: int | str = logging.WARNING) -> None:
    """Add (or replace) the system logger's JSONL file handler.

    Args:
        log_path: Path to the system log file.
        log_level: Minimum level written to the file (default: WARNING).

    Raises:
        PermissionError: If the log directory cannot be created.
        OSError: If the log file cannot be opened.
    """
    global _file_handler

    logger = get_system_logger()

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()

    _file_handler = create_jsonl_handler(log_path, log_level)
    logger.addHandler(_file_handler)
