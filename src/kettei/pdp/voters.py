"""Reusable voter implementations.

StaticVoter answers from a fixed attribute table and backs the scenario
harness. CallableVoter adapts a plain function to the Voter protocol.
"""

from __future__ import annotations

__all__ = [
    "CallableVoter",
    "StaticRule",
    "StaticVoter",
]

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from kettei.exceptions import ConfigurationError, VoterError
from kettei.pdp.models import Ballot


@dataclass(frozen=True, slots=True)
class StaticRule:
    """Fixed answer for one attribute.

    Attributes:
        granted: Whether the attribute is granted.
        reason: Optional reason message.
        error: If set, voting raises VoterError with this message instead.
    """

    granted: bool = False
    reason: str = ""
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.granted:
            raise ConfigurationError("A static rule cannot both grant and fail")


class StaticVoter:
    """Voter answering from a fixed attribute → rule table.

    Supports exactly the attributes present in the table, for every subject.
    """

    def __init__(self, name: str, rules: Mapping[str, StaticRule]) -> None:
        self.name = name
        self._rules = dict(rules)

    @property
    def rules(self) -> dict[str, StaticRule]:
        return dict(self._rules)

    def supports(self, attribute: str, subject: Any) -> bool:
        return attribute in self._rules

    def vote_on_attribute(self, context: Any, attribute: str, subject: Any) -> Ballot:
        rule = self._rules[attribute]
        if rule.error is not None:
            raise VoterError(rule.error, reason=rule.reason)
        return Ballot(rule.granted, rule.reason)

    def __repr__(self) -> str:
        return f"StaticVoter({self.name!r}, attributes={sorted(self._rules)!r})"


class CallableVoter:
    """Voter backed by a function ``(context, attribute, subject) -> bool | Ballot``.

    Args:
        name: Display name used in reasons and logs.
        func: Voting function. A bool result becomes a Ballot without reason.
        attributes: Attributes this voter supports; None supports all.
    """

    def __init__(
        self,
        name: str,
        func: Callable[[Any, str, Any], "bool | Ballot"],
        attributes: Iterable[str] | None = None,
    ) -> None:
        self.name = name
        self._func = func
        self._attributes = frozenset(attributes) if attributes is not None else None

    def supports(self, attribute: str, subject: Any) -> bool:
        return self._attributes is None or attribute in self._attributes

    def vote_on_attribute(self, context: Any, attribute: str, subject: Any) -> Ballot:
        result = self._func(context, attribute, subject)
        if isinstance(result, Ballot):
            return result
        return Ballot(bool(result))

    def __repr__(self) -> str:
        return f"CallableVoter({self.name!r})"
