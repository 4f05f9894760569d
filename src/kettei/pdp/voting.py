"""Single-voter voting routine.

Collapses one voter's opinions on a sequence of attributes into a single
Verdict plus the reasons it produced.

Rules:
1. Unsupported attributes are skipped (no verdict change, no reason)
2. A supported attribute sets the verdict to DENIED until the voter grants it
3. Non-empty reason messages are recorded, also when the call fails
4. The first failure stops the loop; the verdict returned with it is DENIED
5. A result that is not a Ballot counts as a failure (TypeError)

The verdict reflects only the LAST supported attribute evaluated. A grant on
an earlier attribute is discarded if a later supported attribute is denied.
Callers needing per-attribute independence call vote() once per attribute.
"""

from __future__ import annotations

__all__ = ["vote"]

from collections.abc import Sequence
from typing import Any

from kettei.exceptions import VoterError, VoterFailure
from kettei.pdp.models import Ballot, Reason, VoteOutcome
from kettei.pdp.protocol import Voter
from kettei.pdp.verdict import Verdict


def vote(voter: Voter, context: Any, attributes: Sequence[str], subject: Any) -> VoteOutcome:
    """Run one voter over the given attributes.

    Args:
        voter: Voter to consult.
        context: Ambient call context, passed unchanged to the voter.
        attributes: Attributes to evaluate, in order.
        subject: Opaque entity requesting access.

    Returns:
        VoteOutcome with the verdict, reasons and the failure (if any).
    """
    verdict = Verdict.ABSTAIN
    reasons: list[Reason] = []

    for attribute in attributes:
        if not voter.supports(attribute, subject):
            continue

        verdict = Verdict.DENIED

        try:
            ballot = voter.vote_on_attribute(context, attribute, subject)
        except VoterError as e:
            if e.reason:
                reasons.append(Reason(voter, attribute, e.reason))
            return VoteOutcome(verdict, tuple(reasons), VoterFailure(voter, attribute, e))
        except Exception as e:
            return VoteOutcome(verdict, tuple(reasons), VoterFailure(voter, attribute, e))

        if not isinstance(ballot, Ballot):
            error = TypeError(f"vote_on_attribute() must return a Ballot, got {type(ballot).__name__}")
            return VoteOutcome(verdict, tuple(reasons), VoterFailure(voter, attribute, error))

        if ballot.reason:
            reasons.append(Reason(voter, attribute, ballot.reason))

        if ballot.granted:
            verdict = Verdict.GRANTED

    return VoteOutcome(verdict, tuple(reasons))
