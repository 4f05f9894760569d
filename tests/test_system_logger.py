"""Tests for the system logger and JSONL formatting."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from kettei.constants import SYSTEM_LOGGER_NAME
from kettei.pdp import DecisionEngine, Strategy
from kettei.telemetry import ConsoleFormatter, configure_system_logger_file, get_system_logger
from kettei.utils.logging.iso_formatter import ISO8601Formatter
from kettei.utils.logging.logger_setup import create_jsonl_handler


def _record(msg) -> logging.LogRecord:
    return logging.LogRecord("test", logging.WARNING, __file__, 1, msg, None, None)


def _read_jsonl(path: Path) -> list[dict]:
    for handler in get_system_logger().handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text().splitlines() if line]


class TestFormatters:
    def test_iso_formatter_dict_message(self):
        line = ISO8601Formatter().format(_record({"event": "voter_failed", "voter": "ldap"}))

        data = json.loads(line)
        assert list(data)[0] == "time"
        assert data["time"].endswith("Z")
        assert data["level"] == "WARNING"
        assert data["event"] == "voter_failed"

    def test_iso_formatter_plain_message(self):
        data = json.loads(ISO8601Formatter().format(_record("hello")))

        assert data["message"] == "hello"

    def test_console_formatter_extracts_message(self):
        assert ConsoleFormatter().format(_record({"event": "e", "message": "readable"})) == "WARNING: readable"
        assert ConsoleFormatter().format(_record({"event": "e"})) == "WARNING: e"


class TestSystemLogger:
    def test_singleton(self):
        assert get_system_logger() is get_system_logger()
        assert get_system_logger().name == SYSTEM_LOGGER_NAME

    def test_engine_events_written_to_file(self, tmp_path: Path, make_voter):
        # Arrange
        log_path = tmp_path / "logs" / "system.jsonl"
        configure_system_logger_file(log_path, logging.DEBUG)
        engine = DecisionEngine([make_voter("ldap", read=RuntimeError("unreachable"))], Strategy.AFFIRMATIVE)

        # Act
        engine.decide(None, ["read"], "alice")
        DecisionEngine([], "bogus").decide(None, ["read"], "alice")
        DecisionEngine([make_voter("ok", read=True)], Strategy.CONSENSUS).decide(None, ["read"], "alice")

        # Assert
        events = [entry["event"] for entry in _read_jsonl(log_path)]
        assert events == ["voter_failed", "decision", "invalid_strategy", "decision"]

    def test_voter_failure_event_fields(self, tmp_path: Path, make_voter):
        # Arrange
        log_path = tmp_path / "system.jsonl"
        configure_system_logger_file(log_path, logging.WARNING)

        # Act
        DecisionEngine([make_voter("ldap", read=OSError("down"))], Strategy.UNANIMOUS).decide(None, ["read"], "alice")

        # Assert
        (entry,) = _read_jsonl(log_path)
        assert entry["voter"] == "ldap"
        assert entry["attribute"] == "read"
        assert entry["error_type"] == "OSError"
        assert entry["strategy"] == "unanimous"

    @pytest.fixture(autouse=True)
    def _detach_file_handler(self):
        yield
        logger = get_system_logger()
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()


class TestJsonlHandler:
    def test_creates_directory_and_writes_jsonl(self, tmp_path: Path):
        # Arrange
        log_path = tmp_path / "nested" / "events.jsonl"
        handler = create_jsonl_handler(log_path, logging.INFO)
        logger = logging.getLogger("kettei.test.jsonl")
        logger.setLevel(logging.INFO)
        logger.propagate = False
        logger.addHandler(handler)

        # Act
        try:
            logger.info({"event": "rules_reloaded", "value": 1})
        finally:
            logger.removeHandler(handler)
            handler.close()

        # Assert
        (entry,) = [json.loads(line) for line in log_path.read_text().splitlines()]
        assert entry["event"] == "rules_reloaded"
        assert entry["value"] == 1
        assert isinstance(handler.formatter, ISO8601Formatter)
        if sys.platform != "win32":
            assert (log_path.parent.stat().st_mode & 0o777) == 0o700
