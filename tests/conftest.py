"""Shared fixtures for kettei tests.

Provides SpyVoter, a table-driven voter that records every call so tests can
assert which voters and attributes were consulted, and in which order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pytest

from kettei.pdp import Ballot
from kettei.telemetry import get_system_logger, set_console_level

Answer = bool | Ballot | Exception


class SpyVoter:
    """Voter answering from an attribute table and recording calls.

    Attributes missing from ``answers`` are not supported.
    An Exception answer is raised from vote_on_attribute().
    """

    def __init__(self, name: str, answers: dict[str, Answer], call_log: list[tuple[str, str]]) -> None:
        self.name = name
        self.answers = answers
        self.call_log = call_log
        self.calls: list[str] = []
        self.contexts: list[Any] = []

    def supports(self, attribute: str, subject: Any) -> bool:
        return attribute in self.answers

    def vote_on_attribute(self, context: Any, attribute: str, subject: Any) -> Ballot:
        self.calls.append(attribute)
        self.contexts.append(context)
        self.call_log.append((self.name, attribute))
        answer = self.answers[attribute]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, Ballot):
            return answer
        return Ballot(answer)


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    """Ordered (voter name, attribute) log shared by all spy voters of a test."""
    return []


@pytest.fixture
def make_voter(call_log: list[tuple[str, str]]) -> Callable[..., SpyVoter]:
    """Factory: make_voter("name", read=True, write=Ballot.deny("no"))."""

    def _make(name: str, **answers: Answer) -> SpyVoter:
        return SpyVoter(name, answers, call_log)

    return _make


@pytest.fixture(autouse=True)
def _reset_console_level():
    """Create the system logger up front and restore its console level after each test."""
    get_system_logger()
    yield
    set_console_level(logging.WARNING)
