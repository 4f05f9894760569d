"""Decision engine - combine voter verdicts into one decision.

This module provides the DecisionEngine class that consults an ordered list
of voters and folds their verdicts with one of three strategies.

Strategies:
1. AFFIRMATIVE: first GRANTED wins; any DENIED otherwise denies
2. CONSENSUS: majority of GRANTED vs DENIED, every voter consulted
3. UNANIMOUS: each attribute voted separately; first DENIED denies

Tie-breaks:
- All voters abstained → allow_if_all_abstain (default False)
- CONSENSUS with equal non-zero grants and denies → allow_if_equal_granted_denied
  (default True)

Error handling:
- The first voter failure aborts the decision; no further voter is consulted
- Reasons collected so far are returned in the DecisionFailure
- An unknown strategy fails before any voter is consulted

AFFIRMATIVE and CONSENSUS pass the whole attribute sequence to each voter,
so each voter's verdict is the verdict of its last supported attribute
(see kettei.pdp.voting). UNANIMOUS is not affected because it votes one
attribute at a time.
"""

from __future__ import annotations

__all__ = ["DecisionEngine"]

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from kettei.constants import DEFAULT_ALLOW_IF_ALL_ABSTAIN, DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED
from kettei.exceptions import InvalidStrategyError, VoterFailure, voter_name
from kettei.pdp.models import Decided, DecisionFailure, DecisionResult, Reason
from kettei.pdp.protocol import Voter
from kettei.pdp.verdict import Strategy, Verdict
from kettei.pdp.voting import vote
from kettei.telemetry.system_logger import get_system_logger

if TYPE_CHECKING:
    from kettei.config import EngineConfig


def _coerce_strategy(strategy: Any) -> Any:
    """Return the Strategy member for ``strategy``, or the raw value if unknown."""
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except (ValueError, TypeError):
        return strategy


class DecisionEngine:
    """Access decision engine.

    Holds an ordered, read-only list of voters and a strategy fixed at
    construction. decide() keeps no state between calls.

    Attributes:
        voters: Configured voters, in consultation order.
        strategy: Configured strategy (raw value if unrecognized).
        allow_if_all_abstain: Decision when no voter granted or denied.
        allow_if_equal_granted_denied: CONSENSUS decision on a non-zero tie.
    """

    def __init__(
        self,
        voters: Iterable[Voter] = (),
        strategy: Strategy | str = Strategy.AFFIRMATIVE,
        *,
        allow_if_all_abstain: bool = DEFAULT_ALLOW_IF_ALL_ABSTAIN,
        allow_if_equal_granted_denied: bool = DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED,
    ) -> None:
        """Initialize the decision engine.

        Args:
            voters: Voters to consult, in order.
            strategy: Aggregation strategy. An unrecognized value is kept and
                reported by decide() as InvalidStrategyError.
            allow_if_all_abstain: Outcome when every voter abstains.
            allow_if_equal_granted_denied: CONSENSUS outcome on a tie.
        """
        self._voters: tuple[Voter, ...] = tuple(voters)
        self._strategy = _coerce_strategy(strategy)
        self._allow_if_all_abstain = allow_if_all_abstain
        self._allow_if_equal_granted_denied = allow_if_equal_granted_denied

    @classmethod
    def default(cls, *voters: Voter) -> DecisionEngine:
        """Create an engine with the UNANIMOUS strategy that allows when all abstain."""
        return cls(voters, Strategy.UNANIMOUS, allow_if_all_abstain=True)

    @classmethod
    def from_config(cls, config: "EngineConfig", voters: Iterable[Voter]) -> DecisionEngine:
        """Create an engine from a validated EngineConfig.

        Args:
            config: Engine configuration (strategy and tie-break flags).
            voters: Voters to consult, in order.

        Returns:
            Configured DecisionEngine.
        """
        return cls(
            voters,
            config.strategy,
            allow_if_all_abstain=config.allow_if_all_abstain,
            allow_if_equal_granted_denied=config.allow_if_equal_granted_denied,
        )

    @property
    def voters(self) -> tuple[Voter, ...]:
        return self._voters

    @property
    def strategy(self) -> Any:
        return self._strategy

    @property
    def allow_if_all_abstain(self) -> bool:
        return self._allow_if_all_abstain

    @property
    def allow_if_equal_granted_denied(self) -> bool:
        return self._allow_if_equal_granted_denied

    def decide(self, context: Any, attributes: Sequence[str], subject: Any) -> DecisionResult:
        """Decide whether ``subject`` is granted ``attributes``.

        Args:
            context: Ambient call context, passed unchanged to every voter call.
            attributes: Attributes to check, in order.
            subject: Opaque entity requesting access.

        Returns:
            Decided on success, DecisionFailure if the strategy is invalid or
            a voter failed. Both carry the reasons collected.
        """
        attributes = tuple(attributes)

        if self._strategy is Strategy.AFFIRMATIVE:
            result = self._decide_affirmative(context, attributes, subject)
        elif self._strategy is Strategy.CONSENSUS:
            result = self._decide_consensus(context, attributes, subject)
        elif self._strategy is Strategy.UNANIMOUS:
            result = self._decide_unanimous(context, attributes, subject)
        else:
            get_system_logger().error(
                {
                    "event": "invalid_strategy",
                    "message": f"Invalid decision strategy: {self._strategy!r}",
                    "strategy": repr(self._strategy),
                }
            )
            return DecisionFailure(InvalidStrategyError(self._strategy))

        get_system_logger().debug(
            {
                "event": "decision",
                "message": f"{self._strategy.value} decision: granted={result.granted}, ok={result.ok}",
                "strategy": self._strategy.value,
                "attributes": list(attributes),
                "granted": result.granted,
                "ok": result.ok,
                "reason_count": len(result.reasons),
            }
        )
        return result

    def is_granted(self, context: Any, attributes: Sequence[str], subject: Any) -> bool:
        """Return the decision, raising the error if the decision failed.

        Raises:
            InvalidStrategyError: Engine misconfigured.
            VoterFailure: A voter failed.
        """
        return self.decide(context, attributes, subject).unwrap()

    def _decide_affirmative(self, context: Any, attributes: tuple[str, ...], subject: Any) -> DecisionResult:
        """Grant if any voter grants.

        If all voters abstained, the decision is allow_if_all_abstain.
        """
        deny = 0
        reasons: list[Reason] = []

        for voter in self._voters:
            outcome = vote(voter, context, attributes, subject)
            reasons.extend(outcome.reasons)

            if outcome.error is not None:
                return self._fail(outcome.error, reasons)

            if outcome.verdict is Verdict.GRANTED:
                return Decided(True, tuple(reasons))
            if outcome.verdict is Verdict.DENIED:
                deny += 1

        if deny > 0:
            return Decided(False, tuple(reasons))

        return Decided(self._allow_if_all_abstain, tuple(reasons))

    def _decide_consensus(self, context: Any, attributes: tuple[str, ...], subject: Any) -> DecisionResult:
        """Grant if there are more grants than denies (abstains ignored).

        Equal non-zero counts resolve to allow_if_equal_granted_denied.
        If all voters abstained, the decision is allow_if_all_abstain.
        """
        grant = 0
        deny = 0
        reasons: list[Reason] = []

        for voter in self._voters:
            outcome = vote(voter, context, attributes, subject)
            reasons.extend(outcome.reasons)

            if outcome.error is not None:
                return self._fail(outcome.error, reasons)

            if outcome.verdict is Verdict.GRANTED:
                grant += 1
            elif outcome.verdict is Verdict.DENIED:
                deny += 1

        if grant > deny:
            return Decided(True, tuple(reasons))
        if deny > grant:
            return Decided(False, tuple(reasons))
        if grant > 0:
            return Decided(self._allow_if_equal_granted_denied, tuple(reasons))

        return Decided(self._allow_if_all_abstain, tuple(reasons))

    def _decide_unanimous(self, context: Any, attributes: tuple[str, ...], subject: Any) -> DecisionResult:
        """Grant only if no voter denies any attribute and at least one grants.

        Each (voter, attribute) pair is voted separately.
        If nothing was granted or denied, the decision is allow_if_all_abstain.
        """
        grant = 0
        reasons: list[Reason] = []

        for voter in self._voters:
            for attribute in attributes:
                outcome = vote(voter, context, (attribute,), subject)
                reasons.extend(outcome.reasons)

                if outcome.error is not None:
                    return self._fail(outcome.error, reasons)

                if outcome.verdict is Verdict.DENIED:
                    return Decided(False, tuple(reasons))
                if outcome.verdict is Verdict.GRANTED:
                    grant += 1

        if grant > 0:
            return Decided(True, tuple(reasons))

        return Decided(self._allow_if_all_abstain, tuple(reasons))

    def _fail(self, error: VoterFailure, reasons: list[Reason]) -> DecisionFailure:
        get_system_logger().warning(
            {
                "event": "voter_failed",
                "message": str(error),
                "strategy": self._strategy.value,
                "voter": voter_name(error.voter),
                "attribute": error.attribute,
                "error_type": type(error.cause).__name__,
            }
        )
        return DecisionFailure(error, tuple(reasons))
