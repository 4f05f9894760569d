"""Shared file utilities for kettei.

Provides common utilities used by config and scenario loading:
- require_file_exists: Helpful FileNotFoundError for missing files
- load_validated_json: JSON parsing plus Pydantic validation
"""

from __future__ import annotations

__all__ = [
    "load_validated_json",
    "require_file_exists",
]

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

# Type variable for Pydantic models
T = TypeVar("T", bound=BaseModel)


def require_file_exists(file_path: Path, file_type: str = "file") -> None:
    """Raise FileNotFoundError with helpful message if file doesn't exist.

    Args:
        file_path: Path to check.
        file_type: Description for error message (e.g., "config", "scenario").

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if file_path.exists():
        return

    raise FileNotFoundError(f"{file_type.capitalize()} file not found at {file_path}.")


def load_validated_json(
    file_path: Path,
    model_class: type[T],
    file_type: str = "file",
    encoding: str | None = "utf-8",
) -> T:
    """Load JSON file and validate against Pydantic model.

    Combines file reading, JSON parsing, and Pydantic validation with
    consistent error messages.

    Args:
        file_path: Path to JSON file.
        model_class: Pydantic model class to validate against.
        file_type: Description for error messages (e.g., "config", "scenario").
        encoding: File encoding.

    Returns:
        Validated Pydantic model instance.

    Raises:
        ValueError: If JSON is invalid or validation fails.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Could not read {file_type} file {file_path}: {e}") from e

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}" if loc else f"  - {error['msg']}")
        raise ValueError(f"Invalid {file_type} file {file_path}:\n" + "\n".join(errors)) from e
