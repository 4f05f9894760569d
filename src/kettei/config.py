"""Engine configuration for kettei.

Defines configuration models for the decision engine and logging. Voters are
code, not configuration: they are passed to DecisionEngine.from_config().

Example usage:
    config = EngineConfig.load_from_file(config_path)
    engine = DecisionEngine.from_config(config, voters)
"""

from __future__ import annotations

__all__ = [
    "EngineConfig",
    "LoggingConfig",
]

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from kettei.constants import DEFAULT_ALLOW_IF_ALL_ABSTAIN, DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED
from kettei.pdp.verdict import Strategy
from kettei.utils.file_helpers import load_validated_json, require_file_exists


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        log_level: Minimum level printed to stderr.
        log_file: Optional JSONL file receiving the same events.
    """

    model_config = ConfigDict(extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: str | None = None


class EngineConfig(BaseModel):
    """Decision engine configuration.

    Attributes:
        strategy: Aggregation strategy.
        allow_if_all_abstain: Decision when every voter abstains.
        allow_if_equal_granted_denied: CONSENSUS decision on a non-zero tie.
        logging: Logging settings.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strategy: Strategy = Strategy.AFFIRMATIVE
    allow_if_all_abstain: bool = DEFAULT_ALLOW_IF_ALL_ABSTAIN
    allow_if_equal_granted_denied: bool = DEFAULT_ALLOW_IF_EQUAL_GRANTED_DENIED
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> EngineConfig:
        """Load configuration from a JSON file.

        Args:
            config_path: Path to the JSON config file.

        Returns:
            Validated EngineConfig.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid JSON or fails validation.
        """
        require_file_exists(config_path, file_type="config")
        return load_validated_json(config_path, cls, file_type="config")

    def save_to_file(self, config_path: Path) -> None:
        """Write configuration as indented JSON.

        Args:
            config_path: Destination path; parent directories are created.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2, exclude_none=True) + "\n", encoding="utf-8")
