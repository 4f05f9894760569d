"""Logger setup utilities for JSONL file output.

Handlers created here write JSONL with ISO 8601 timestamps to a file path,
creating the parent directory with owner-only permissions.
"""

from __future__ import annotations

__all__ = [
    "create_jsonl_handler",
    "ensure_secure_log_directory",
]

import logging
import sys
from pathlib import Path

from kettei.utils.logging.iso_formatter import ISO8601Formatter


def ensure_secure_log_directory(log_file: Path) -> None:
    """Create log directory with secure permissions.

    Args:
        log_file: Path to the log file (parent directory will be created).

    Raises:
        PermissionError: If unable to create log directory due to permissions.
        OSError: If directory creation fails for other reasons.
    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        if sys.platform != "win32":
            try:
                log_file.parent.chmod(0o700)
            except OSError:
                pass  # Permission changes might fail on some systems
    except PermissionError as e:
        raise PermissionError(f"Cannot create log directory {log_file.parent}: {e}") from e
    except OSError as e:
        raise OSError(f"Failed to create log directory {log_file.parent}: {e}") from e


def create_jsonl_handler(
    log_file: Path,
    log_level: int | str = logging.INFO,
) -> logging.FileHandler:
    """Create a file handler that writes JSONL with ISO 8601 timestamps.

    Args:
        log_file: Path to the log file
        log_level: Logging level (default: INFO)

    Returns:
        logging.FileHandler: Handler with ISO8601Formatter attached

    Raises:
        PermissionError: If unable to create log directory due to permissions
        OSError: If directory creation or file open fails
    """
    ensure_secure_log_directory(log_file)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(ISO8601Formatter())
    return file_handler
