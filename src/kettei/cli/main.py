"""Main CLI entry point for kettei.

Commands:
    decide    - Run the decision described by a scenario file
    validate  - Validate a scenario file

Subcommand help:
    kettei COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli"]

import sys

import click

from kettei import __version__

from .commands.decide import decide
from .commands.validate import validate


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """kettei: voter-based access decisions."""
    if version:
        click.echo(f"kettei {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(decide)
cli.add_command(validate)


def main() -> None:
    """CLI entry point."""
    cli()
