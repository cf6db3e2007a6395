"""CLI command for applying a saved commit plan."""

from pathlib import Path
from typing import Optional

import typer

from commitcraft.cache.plan import cache_applied_plan
from commitcraft.exceptions import CommitcraftError
from commitcraft.git.status import files_from_status_porcelain
from commitcraft.plan.applier import apply_plan
from commitcraft.plan.files import load_plan_file, save_plan_file
from commitcraft.plan.guard import DuplicateGuard
from commitcraft.plan.models import CommitPlan
from commitcraft.plan.normalize import normalize_plan_files
from commitcraft.plan.render import print_plan_human
from commitcraft.cli.utils import build_settings, fail, open_repository


def apply_command(
    plan_file: Path = typer.Argument(
        ...,
        help="Plan JSON written by 'commitcraft plan --out'",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be committed without touching git",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Style preset used to validate messages",
    ),
) -> None:
    """Create the commits described by a plan file.

    Commits are created in order. If one fails, the commits already created
    are kept and their hashes are written back to the plan file.
    """
    settings = build_settings(style=style)
    repo = open_repository()

    try:
        plan = load_plan_file(plan_file)
        changed_files = files_from_status_porcelain(repo.status())
    except CommitcraftError as e:
        fail(str(e))

    normalize_plan_files(plan, changed_files)

    if not plan.commits:
        typer.echo("Plan has no commits. Nothing to apply.")
        return

    typer.echo("Plan to apply:")
    print_plan_human(plan)
    typer.echo("")

    if dry_run:
        typer.echo("Dry run: no commits were created.")
        return

    if not yes and not typer.confirm(f"Create {len(plan.commits)} commit(s)?", default=False):
        typer.echo("Aborted.")
        raise typer.Exit(0)

    guard = DuplicateGuard(
        repo,
        window=settings.duplicate_window,
        max_patch_bytes=settings.duplicate_max_bytes,
    )

    try:
        report = apply_plan(plan, repo, preset=settings.style, guard=guard)
    except CommitcraftError as e:
        _record(repo.root, plan_file, plan)
        fail(str(e))

    _record(repo.root, plan_file, plan)

    for index, commit_hash in report.created:
        typer.echo(f"Created commit #{index}: {commit_hash[:12]}")
    if report.skipped:
        skipped = ", ".join(f"#{i}" for i in report.skipped)
        typer.echo(f"Skipped (nothing to commit): {skipped}")
    typer.echo(f"Done: {len(report.created)} commit(s) created.")


def _record(repo_root: Path, plan_file: Path, plan: CommitPlan) -> None:
    """Write hashes back to the plan file and keep a copy in the cache."""
    try:
        save_plan_file(plan_file, plan)
    except CommitcraftError as e:
        typer.echo(f"Warning: {e}", err=True)
    cache_applied_plan(repo_root, plan)
