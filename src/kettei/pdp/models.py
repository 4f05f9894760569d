"""Value objects passed between voters, the voting routine and the engine.

Structure:
    Ballot           - A voter's answer for one attribute
    Reason           - Explanation attached to a ballot
    VoteOutcome      - Result of vote() for one voter
    Decided          - Successful decision
    DecisionFailure  - Failed decision (fail-closed, with partial reasons)
"""

from __future__ import annotations

__all__ = [
    "Ballot",
    "Decided",
    "DecisionFailure",
    "DecisionResult",
    "Reason",
    "VoteOutcome",
]

from dataclasses import dataclass
from typing import Any, Union

from kettei.exceptions import KetteiError, VoterFailure, voter_name
from kettei.pdp.verdict import Verdict


@dataclass(frozen=True, slots=True)
class Ballot:
    """A voter's answer for a single attribute.

    Attributes:
        granted: Whether the voter grants the attribute.
        reason: Optional explanation; empty string means no reason.
    """

    granted: bool
    reason: str = ""

    @classmethod
    def grant(cls, reason: str = "") -> Ballot:
        return cls(True, reason)

    @classmethod
    def deny(cls, reason: str = "") -> Ballot:
        return cls(False, reason)


@dataclass(frozen=True, slots=True)
class Reason:
    """Explanation produced by a voter for an attribute.

    Attributes:
        voter: Reference to the voter that produced the message.
        attribute: Attribute the message refers to.
        message: Non-empty human-readable explanation.
    """

    voter: Any
    attribute: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Serialize for logs and CLI output (voter rendered by name)."""
        return {
            "voter": voter_name(self.voter),
            "attribute": self.attribute,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class VoteOutcome:
    """Result of running one voter over a sequence of attributes."""

    verdict: Verdict
    reasons: tuple[Reason, ...] = ()
    error: VoterFailure | None = None


@dataclass(frozen=True, slots=True)
class Decided:
    """Decision reached without errors.

    Attributes:
        granted: Final grant/deny outcome.
        reasons: All reasons collected, in evaluation order.
    """

    granted: bool
    reasons: tuple[Reason, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> bool:
        return self.granted

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": True,
            "granted": self.granted,
            "reasons": [reason.to_dict() for reason in self.reasons],
        }


@dataclass(frozen=True, slots=True)
class DecisionFailure:
    """Decision aborted by an error.

    ``granted`` is always False. It exists so callers can treat every result
    uniformly as fail-closed; it is not a real deny outcome.

    Attributes:
        error: InvalidStrategyError or VoterFailure.
        reasons: Reasons collected up to and including the failing call.
    """

    error: KetteiError
    reasons: tuple[Reason, ...] = ()

    @property
    def ok(self) -> bool:
        return False

    @property
    def granted(self) -> bool:
        return False

    def unwrap(self) -> bool:
        """Raise the wrapped error."""
        raise self.error

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": False,
            "granted": False,
            "error": str(self.error),
            "error_type": type(self.error).__name__,
            "reasons": [reason.to_dict() for reason in self.reasons],
        }


DecisionResult = Union[Decided, DecisionFailure]
