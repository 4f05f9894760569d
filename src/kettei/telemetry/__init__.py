"""Operational logging for kettei.

Decisions are never persisted here; the system logger only records
operational events such as voter failures and misconfiguration.
"""

from kettei.telemetry.system_logger import (
    ConsoleFormatter,
    configure_system_logger_file,
    get_system_logger,
    set_console_level,
)

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]
