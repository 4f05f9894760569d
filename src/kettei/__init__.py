"""kettei - attribute-based access decisions from composable voters."""

from kettei.exceptions import (
    ConfigurationError,
    InvalidStrategyError,
    KetteiError,
    VoterError,
    VoterFailure,
)
from kettei.pdp import (
    Ballot,
    CallableVoter,
    Decided,
    DecisionEngine,
    DecisionFailure,
    DecisionResult,
    Reason,
    StaticRule,
    StaticVoter,
    Strategy,
    Verdict,
    Voter,
    vote,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "DecisionEngine",
    "Strategy",
    "Voter",
    "Verdict",
    "vote",
    # Results
    "Ballot",
    "Decided",
    "DecisionFailure",
    "DecisionResult",
    "Reason",
    # Voters
    "CallableVoter",
    "StaticRule",
    "StaticVoter",
    # Errors
    "ConfigurationError",
    "InvalidStrategyError",
    "KetteiError",
    "VoterError",
    "VoterFailure",
]
