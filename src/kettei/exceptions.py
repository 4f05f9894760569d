"""Custom exceptions for kettei.

This module contains all custom exceptions used throughout the package.

Engine errors (returned inside DecisionFailure, never raised by decide()):
    - KetteiError: Base for all errors produced by the engine
    - InvalidStrategyError: Engine configured with an unknown strategy
    - VoterFailure: A voter's vote_on_attribute() call failed

Voter-side errors (raised by voter implementations):
    - VoterError: Failure that may carry a reason message

Usage:
    from kettei.exceptions import VoterError, VoterFailure
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "InvalidStrategyError",
    "KetteiError",
    "VoterError",
    "VoterFailure",
]

from typing import Any


class KetteiError(Exception):
    """Base exception for errors produced by the decision engine."""


class InvalidStrategyError(KetteiError):
    """Engine is configured with an unrecognized strategy value.

    Detected by decide() before any voter is consulted.

    Attributes:
        strategy: The offending configured value.
    """

    def __init__(self, strategy: Any) -> None:
        self.strategy = strategy
        super().__init__(f"invalid strategy: {strategy!r}")


class VoterFailure(KetteiError):
    """A voter failed while voting on an attribute.

    The engine does not inspect or classify the underlying cause; it is kept
    as ``cause`` (and ``__cause__``) for the caller.

    Attributes:
        voter: The voter whose call failed.
        attribute: Attribute being evaluated when the failure occurred.
        cause: The exception raised by the voter.
    """

    def __init__(self, voter: Any, attribute: str, cause: BaseException) -> None:
        self.voter = voter
        self.attribute = attribute
        self.cause = cause
        super().__init__(f"voter {voter_name(voter)!r} failed on attribute {attribute!r}: {cause}")
        self.__cause__ = cause


class VoterError(Exception):
    """Raised by voter implementations to report a failed vote.

    Any exception raised from vote_on_attribute() counts as a failure; this
    one additionally lets the voter attach a reason message, which is
    recorded alongside the failure.

    Attributes:
        reason: Optional human-readable explanation ("" when absent).
    """

    def __init__(self, message: str, *, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason


class ConfigurationError(KetteiError):
    """Engine or voter configuration built in code is invalid."""


def voter_name(voter: Any) -> str:
    """Return a display name for a voter (its ``name`` attribute or class name)."""
    name = getattr(voter, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(voter).__name__
