"""CLI command for proposing a commit plan."""

from pathlib import Path
from typing import Optional

import typer

from commitcraft.exceptions import CommitcraftError
from commitcraft.plan.files import save_plan_file
from commitcraft.plan.generator import generate_plan
from commitcraft.plan.normalize import normalize_plan_files
from commitcraft.plan.render import print_plan_human
from commitcraft.cli.utils import build_settings, fail, open_repository


def plan_command(
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the plan JSON to this file",
    ),
    json_only: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print only the plan JSON",
    ),
    regenerate: bool = typer.Option(
        False,
        "--regenerate",
        "-r",
        help="Ignore the cached plan and ask the model again",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (defaults to the configured model)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Provider to use (gemini, openai, rest, deepseek, zai, openrouter, groq, relay)",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Style preset (conventional, conventional-emojis, detailed, concise)",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        help="Language for commit descriptions",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        help="Truncate the diff sent to the model beyond this many characters",
    ),
) -> None:
    """Propose a commit plan for the pending changes.

    Groups the working tree changes into logical commits. Nothing is staged
    or committed; use 'commitcraft apply' on a saved plan for that.
    """
    settings = build_settings(provider, model, style, language, max_diff_chars)
    repo = open_repository()

    if not json_only:
        typer.echo(f"Asking {settings.provider.value} model '{settings.model}' for a commit plan...", err=True)

    try:
        result = generate_plan(repo, settings, regenerate=regenerate)
    except CommitcraftError as e:
        fail(str(e))

    if result.snapshot.is_clean:
        typer.echo("No changes detected (git status is clean). Nothing to plan.")
        return

    if result.from_cache:
        typer.echo("Using cached plan (use --regenerate to ask again).", err=True)

    plan = normalize_plan_files(result.plan, result.snapshot.changed_files)
    plan_json = plan.to_json()

    if json_only:
        typer.echo(plan_json)
    else:
        typer.echo("")
        typer.echo("Proposed Plan:")
        print_plan_human(plan)
        typer.echo("")
        typer.echo("JSON Output:")
        typer.echo(plan_json)

    if out:
        try:
            save_plan_file(out, plan)
        except CommitcraftError as e:
            fail(str(e))
        typer.echo(f"Saved plan to: {out}", err=json_only)
