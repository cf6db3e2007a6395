"""CLI entry point for commitcraft.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitcraft import __version__
from commitcraft.cli.apply import apply_command
from commitcraft.cli.cache import cache_app
from commitcraft.cli.config import config_app
from commitcraft.cli.plan import plan_command

# Main application
app = typer.Typer(
    name="commitcraft",
    help="commitcraft: AI-assisted commit planner",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(cache_app, name="cache")
app.add_typer(config_app, name="config")

# Add individual commands
app.command("plan")(plan_command)
app.command("apply")(apply_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitcraft {__version__}")
        raise typer.Exit()


@app.callback()
def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Split pending changes into logical, safely-applied commits."""


__all__ = [
    "app",
    "cache_app",
    "config_app",
    "plan_command",
    "apply_command",
    "main_command",
]
