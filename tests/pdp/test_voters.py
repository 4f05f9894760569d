"""Tests for the Voter protocol and the reusable voters."""

from __future__ import annotations

import pytest

from kettei.exceptions import ConfigurationError, VoterError
from kettei.pdp import Ballot, CallableVoter, DecisionEngine, StaticRule, StaticVoter, Strategy, Voter


class TestVoterProtocol:
    """Structural subtyping of the Voter protocol."""

    def test_static_voter_is_voter(self):
        assert isinstance(StaticVoter("s", {}), Voter)

    def test_callable_voter_is_voter(self):
        assert isinstance(CallableVoter("c", lambda ctx, attr, subj: True), Voter)

    def test_plain_class_is_voter(self):
        class Custom:
            def supports(self, attribute, subject):
                return True

            def vote_on_attribute(self, context, attribute, subject):
                return Ballot.grant()

        assert isinstance(Custom(), Voter)

    def test_missing_method_is_not_voter(self):
        class Incomplete:
            def supports(self, attribute, subject):
                return True

        assert not isinstance(Incomplete(), Voter)


class TestStaticVoter:
    def test_supports_only_listed_attributes(self):
        voter = StaticVoter("s", {"read": StaticRule(granted=True)})

        assert voter.supports("read", None)
        assert not voter.supports("write", None)

    def test_returns_configured_ballot(self):
        voter = StaticVoter("s", {"read": StaticRule(granted=False, reason="read-only account")})

        assert voter.vote_on_attribute(None, "read", None) == Ballot(False, "read-only account")

    def test_error_rule_raises_voter_error_with_reason(self):
        # Arrange
        voter = StaticVoter("s", {"read": StaticRule(error="timeout", reason="service slow")})

        # Act
        with pytest.raises(VoterError) as exc_info:
            voter.vote_on_attribute(None, "read", None)

        # Assert
        assert str(exc_info.value) == "timeout"
        assert exc_info.value.reason == "service slow"

    def test_rule_cannot_grant_and_fail(self):
        with pytest.raises(ConfigurationError):
            StaticRule(granted=True, error="boom")

    def test_rules_copy(self):
        # Arrange
        rules = {"read": StaticRule(granted=True)}
        voter = StaticVoter("s", rules)

        # Act
        rules.clear()

        # Assert
        assert "read" in voter.rules


class TestCallableVoter:
    def test_bool_result_becomes_ballot(self):
        voter = CallableVoter("admin", lambda ctx, attr, subj: subj == "root")

        assert voter.vote_on_attribute(None, "admin", "root") == Ballot(True)
        assert voter.vote_on_attribute(None, "admin", "alice") == Ballot(False)

    def test_ballot_result_passed_through(self):
        voter = CallableVoter("c", lambda ctx, attr, subj: Ballot.deny("nope"))

        assert voter.vote_on_attribute(None, "x", None) == Ballot(False, "nope")

    def test_attribute_filter(self):
        voter = CallableVoter("c", lambda ctx, attr, subj: True, attributes=["read"])

        assert voter.supports("read", None)
        assert not voter.supports("write", None)

    def test_supports_everything_without_filter(self):
        voter = CallableVoter("c", lambda ctx, attr, subj: True)

        assert voter.supports("anything", None)

    def test_receives_context(self):
        seen = []

        def func(ctx, attr, subj):
            seen.append((ctx, attr, subj))
            return True

        engine = DecisionEngine([CallableVoter("c", func)], Strategy.UNANIMOUS)
        engine.decide("ctx", ["read", "write"], "alice")

        assert seen == [("ctx", "read", "alice"), ("ctx", "write", "alice")]
