"""Scenario files for the policy-test harness.

A scenario describes an engine configuration, a set of static voters, the
attributes to check and an optional expected outcome. It lets policy
compositions be exercised from the command line without writing voters.

Example scenario:
    {
      "engine": {"strategy": "consensus"},
      "attributes": ["read"],
      "subject": {"id": "alice"},
      "voters": [
        {"name": "owner", "rules": {"read": {"granted": true, "reason": "owner"}}},
        {"name": "ldap", "rules": {"read": {"error": "directory unavailable"}}}
      ],
      "expect": true
    }
"""

from __future__ import annotations

__all__ = [
    "Scenario",
    "StaticRuleConfig",
    "StaticVoterConfig",
]

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kettei.config import EngineConfig
from kettei.pdp.engine import DecisionEngine
from kettei.pdp.models import DecisionResult
from kettei.pdp.voters import StaticRule, StaticVoter
from kettei.utils.file_helpers import load_validated_json, require_file_exists


class StaticRuleConfig(BaseModel):
    """Fixed answer of a static voter for one attribute."""

    model_config = ConfigDict(extra="forbid")

    granted: bool = False
    reason: str = ""
    error: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _check_error_not_granted(self) -> StaticRuleConfig:
        if self.error is not None and self.granted:
            raise ValueError("a rule cannot both grant and fail")
        return self

    def to_rule(self) -> StaticRule:
        return StaticRule(granted=self.granted, reason=self.reason, error=self.error)


class StaticVoterConfig(BaseModel):
    """A static voter: name plus attribute → rule table."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    rules: dict[str, StaticRuleConfig] = Field(default_factory=dict)

    def to_voter(self) -> StaticVoter:
        return StaticVoter(self.name, {attr: rule.to_rule() for attr, rule in self.rules.items()})


class Scenario(BaseModel):
    """Policy-test harness scenario.

    Attributes:
        engine: Engine configuration.
        attributes: Attributes to check, in order.
        subject: Opaque subject (any JSON value), passed to voters unchanged.
        voters: Static voters, in consultation order.
        expect: Expected decision; None means no expectation.
    """

    model_config = ConfigDict(extra="forbid")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    attributes: list[str] = Field(min_length=1)
    subject: Any = None
    voters: list[StaticVoterConfig] = Field(default_factory=list)
    expect: bool | None = None

    @classmethod
    def load_from_file(cls, path: Path) -> Scenario:
        """Load and validate a scenario JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid JSON or fails validation.
        """
        require_file_exists(path, file_type="scenario")
        return load_validated_json(path, cls, file_type="scenario")

    def build_engine(self) -> DecisionEngine:
        """Construct the engine and its static voters."""
        return DecisionEngine.from_config(self.engine, [voter.to_voter() for voter in self.voters])

    def run(self, context: Any = None) -> DecisionResult:
        """Build the engine and decide on this scenario's attributes and subject."""
        return self.build_engine().decide(context, self.attributes, self.subject)

    def matches_expectation(self, result: DecisionResult) -> bool:
        """True if no expectation is set or the successful result matches it."""
        if self.expect is None:
            return True
        return result.ok and result.granted == self.expect
