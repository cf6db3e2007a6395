"""Reconcile model-proposed file lists with the real changed-file set.

Contains:
- files_from_status_porcelain: Changed-file set from porcelain status
- normalize_plan_files: Expand directory prefixes, sort, dedupe, fill commands
- preview_commands: The two illustrative commands for a commit
"""

from commitcraft.git.status import files_from_status_porcelain, unquote_path
from commitcraft.plan.models import CommitPlan


def preview_commands(message: str, files: list[str]) -> list[str]:
    """Build the stage/commit preview strings shown for a commit.

    These are for display only and are never executed.
    """
    escaped = message.replace('"', '\\"')
    return [
        f"git add -- {' '.join(files)}",
        f'git commit -m "{escaped}"',
    ]


def _normalize_files(raw_files: list[str], changed_files: list[str]) -> list[str]:
    normalized = set()
    for entry in raw_files:
        # The model may echo paths in the quoted form it saw in the status
        entry = unquote_path(entry.strip())
        if not entry:
            continue

        # Directory prefix: expand to the changed files underneath it
        if entry.endswith("/"):
            normalized.update(f for f in changed_files if f.startswith(entry))
            continue

        normalized.add(entry)

    return sorted(normalized)


def normalize_plan_files(plan: CommitPlan, changed_files: list[str]) -> CommitPlan:
    """Normalize every commit's file list in place.

    Literal paths are kept as given (after trimming); entries ending in "/"
    are replaced by the changed files they prefix. Commits without commands
    get the two preview commands synthesized.

    Args:
        plan: The plan to normalize (mutated).
        changed_files: Authoritative changed-file set.

    Returns:
        The same plan, for chaining.
    """
    for commit in plan.commits:
        commit.files = _normalize_files(commit.files, changed_files)
        if not commit.commands:
            commit.commands = preview_commands(commit.message, commit.files)
    return plan


__all__ = [
    "files_from_status_porcelain",
    "normalize_plan_files",
    "preview_commands",
]
