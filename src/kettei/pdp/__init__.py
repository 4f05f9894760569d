"""Policy Decision Point (PDP) - voter-based access decisions.

The PDP is stateless: voters are consulted in order and their verdicts are
folded into one decision. All I/O happens inside voters.

Structure:
    verdict.py   - Verdict and Strategy enums
    models.py    - Ballot, Reason, VoteOutcome, Decided, DecisionFailure
    protocol.py  - Voter protocol
    voting.py    - Single-voter vote() routine
    engine.py    - DecisionEngine and strategies
    voters.py    - StaticVoter, CallableVoter
"""

from kettei.pdp.engine import DecisionEngine
from kettei.pdp.models import (
    Ballot,
    Decided,
    DecisionFailure,
    DecisionResult,
    Reason,
    VoteOutcome,
)
from kettei.pdp.protocol import Voter
from kettei.pdp.verdict import Strategy, Verdict
from kettei.pdp.voters import CallableVoter, StaticRule, StaticVoter
from kettei.pdp.voting import vote

__all__ = [
    # Engine
    "DecisionEngine",
    "Strategy",
    # Voting
    "Voter",
    "Verdict",
    "vote",
    # Models
    "Ballot",
    "Decided",
    "DecisionFailure",
    "DecisionResult",
    "Reason",
    "VoteOutcome",
    # Voters
    "CallableVoter",
    "StaticRule",
    "StaticVoter",
]
