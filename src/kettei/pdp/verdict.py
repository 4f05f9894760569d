"""Verdict and strategy enumerations.

Verdict is one voter's opinion for one voting round. Strategy selects the
aggregation rule used by the DecisionEngine.
"""

from __future__ import annotations

__all__ = ["Strategy", "Verdict"]

from enum import Enum, IntEnum


class Verdict(IntEnum):
    """Outcome of a single vote() call.

    Ordered: DENIED < ABSTAIN < GRANTED. ABSTAIN is the neutral value.
    """

    DENIED = -1
    ABSTAIN = 0
    GRANTED = 1


class Strategy(str, Enum):
    """Decision strategy combining voter verdicts.

    Inherits from str for easy serialization in config files.

    Attributes:
        AFFIRMATIVE: Grant as soon as any voter grants.
        CONSENSUS: Majority of non-abstaining voters decides.
        UNANIMOUS: Any denial on any attribute denies.
    """

    AFFIRMATIVE = "affirmative"
    CONSENSUS = "consensus"
    UNANIMOUS = "unanimous"
