"""Decide command for kettei CLI.

Runs the decision described by a scenario file and reports the outcome,
the collected reasons and whether it matches the scenario's expectation.
"""

from __future__ import annotations

__all__ = ["decide"]

import json
import sys
from pathlib import Path

import click

from kettei.constants import EXIT_DECISION_FAILED, EXIT_EXPECTATION_MISMATCH, EXIT_INVALID_INPUT, EXIT_OK
from kettei.pdp.models import DecisionResult
from kettei.pdp.verdict import Strategy
from kettei.scenario import Scenario
from kettei.telemetry.system_logger import configure_system_logger_file, set_console_level

from ..styling import style_dim, style_error, style_label, style_success


def _print_result(scenario: Scenario, result: DecisionResult) -> None:
    if not result.ok:
        click.echo(style_error(f"Decision failed: {result.error}"))
    elif result.granted:
        click.echo(style_success("GRANTED"))
    else:
        click.echo(style_error("DENIED"))

    click.echo(f"{style_label('Strategy')} {scenario.engine.strategy.value}")
    click.echo(f"{style_label('Attributes')} {', '.join(scenario.attributes)}")

    if result.reasons:
        click.echo(style_label("Reasons"))
        for reason in result.reasons:
            data = reason.to_dict()
            click.echo(f"  [{data['voter']}] {data['attribute']}: {data['message']}")
    else:
        click.echo(style_dim("No reasons given."))

    if scenario.expect is not None:
        expected = "granted" if scenario.expect else "denied"
        if scenario.matches_expectation(result):
            click.echo(style_success(f"Matches expectation ({expected})"))
        else:
            click.echo(style_error(f"Expected {expected}"))


@click.command("decide")
@click.argument("scenario_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--strategy",
    "-s",
    type=click.Choice([s.value for s in Strategy]),
    help="Override the scenario's strategy",
)
@click.option("--json", "output_json", is_flag=True, help="Output result as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Print debug logs to stderr")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs as JSONL to this file",
)
def decide(
    scenario_path: Path,
    strategy: str | None,
    output_json: bool,
    verbose: bool,
    log_file: Path | None,
) -> None:
    """Run the decision described by a scenario file.

    Exit codes:
        0: Decision made (and matches the scenario's expectation, if any)
        1: Expectation mismatch, or scenario invalid or not found
        2: Decision failed (voter failure or invalid strategy)
    """
    try:
        scenario = Scenario.load_from_file(scenario_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_INVALID_INPUT)

    if strategy is not None:
        scenario = scenario.model_copy(
            update={"engine": scenario.engine.model_copy(update={"strategy": Strategy(strategy)})}
        )

    logging_config = scenario.engine.logging
    set_console_level("DEBUG" if verbose else logging_config.log_level)
    log_path = log_file or (Path(logging_config.log_file).expanduser() if logging_config.log_file else None)
    if log_path is not None:
        try:
            configure_system_logger_file(log_path, "DEBUG")
        except OSError as e:
            click.echo(style_error(f"Cannot open log file: {e}"), err=True)
            sys.exit(EXIT_INVALID_INPUT)

    result = scenario.run()

    if output_json:
        payload = result.to_dict()
        payload["strategy"] = scenario.engine.strategy.value
        if scenario.expect is not None:
            payload["expect"] = scenario.expect
            payload["matches_expectation"] = scenario.matches_expectation(result)
        click.echo(json.dumps(payload, indent=2))
    else:
        _print_result(scenario, result)

    if not result.ok:
        sys.exit(EXIT_DECISION_FAILED)
    if not scenario.matches_expectation(result):
        sys.exit(EXIT_EXPECTATION_MISMATCH)
    sys.exit(EXIT_OK)
