"""CLI commands for the plan cache."""

import typer

from commitcraft.cache.plan import clear_cache, load_applied_plan
from commitcraft.plan.render import print_plan_human
from commitcraft.cli.utils import open_repository

# Subcommand group for the plan cache
cache_app = typer.Typer(
    name="cache",
    help="Manage the plan cache in .git/commitcraft_cache/",
    add_completion=False,
)


@cache_app.command("clear")
def cache_clear() -> None:
    """Remove the cached plan so the next 'plan' asks the model again."""
    repo = open_repository()
    if clear_cache(repo.root):
        typer.echo("Cache cleared.")
    else:
        typer.echo("No cached plan found.")


@cache_app.command("last")
def cache_last(
    json_only: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the plan as JSON",
    ),
) -> None:
    """Show the most recently applied plan, with commit hashes."""
    repo = open_repository()
    plan = load_applied_plan(repo.root)
    if plan is None:
        typer.echo("No applied plan recorded.")
        return

    if json_only:
        typer.echo(plan.to_json())
    else:
        print_plan_human(plan)
