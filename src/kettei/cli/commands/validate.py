"""Validate command for kettei CLI."""

from __future__ import annotations

__all__ = ["validate"]

import sys
from pathlib import Path

import click

from kettei.constants import EXIT_INVALID_INPUT
from kettei.scenario import Scenario

from ..styling import style_error, style_success


@click.command("validate")
@click.argument("scenario_path", type=click.Path(dir_okay=False, path_type=Path))
def validate(scenario_path: Path) -> None:
    """Validate a scenario file.

    Checks JSON syntax and the scenario schema (engine settings, voters,
    attributes).

    Exit codes:
        0: Scenario is valid
        1: Scenario is invalid or not found
    """
    try:
        scenario = Scenario.load_from_file(scenario_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_INVALID_INPUT)

    voter_count = len(scenario.voters)
    click.echo(style_success(f"Scenario valid: {scenario_path}"))
    click.echo(f"  strategy: {scenario.engine.strategy.value}")
    click.echo(f"  {voter_count} voter{'s' if voter_count != 1 else ''} defined")
