"""Application-wide constants for kettei.

For user-configurable settings, see config.py.
"""

__all__ = [
    "APP_NAME",
    "DEFAULT_ALLOW_IF_ALL_ABSTAIN",
    "DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED",
    "EXIT_DECISION_FAILED",
    "EXIT_EXPECTATION_MISMATCH",
    "EXIT_INVALID_INPUT",
    "EXIT_OK",
    "SYSTEM_LOGGER_NAME",
]

APP_NAME = "kettei"

SYSTEM_LOGGER_NAME = f"{APP_NAME}.system"

# Tie-break defaults
DEFAULT_ALLOW_IF_ALL_ABSTAIN = False
DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED = True

# CLI exit codes
EXIT_OK = 0
EXIT_EXPECTATION_MISMATCH = 1
EXIT_INVALID_INPUT = 1
EXIT_DECISION_FAILED = 2
