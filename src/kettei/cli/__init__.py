"""Command-line interface for kettei.

Provides a policy-test harness that runs decisions from scenario files.
"""

from .main import cli, main

__all__ = ["cli", "main"]
