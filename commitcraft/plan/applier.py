"""Plan applier.

Turns a CommitPlan into real commits, strictly in list order. Application
is not transactional: when a later commit fails, earlier ones stay.

Contains:
- ApplyReport: What happened during a run
- apply_plan: Stage, check and commit every planned commit
"""

from dataclasses import dataclass, field
from typing import Optional

import typer

from commitcraft.config import StylePreset
from commitcraft.git.repository import GitRepository
from commitcraft.plan.exceptions import DuplicatePatchError, PlanPreconditionError
from commitcraft.plan.guard import DuplicateGuard
from commitcraft.plan.models import CommitPlan
from commitcraft.plan.render import render_commit_message
from commitcraft.plan.validator import CommitMessageValidator


@dataclass
class ApplyReport:
    """Outcome of apply_plan.

    Attributes:
        created: (1-based index, commit hash) for every commit created.
        skipped: 1-based indices of commits whose files had nothing to stage.
    """

    created: list[tuple[int, str]] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


def apply_plan(
    plan: CommitPlan,
    repo: GitRepository,
    preset: Optional[StylePreset] = None,
    guard: Optional[DuplicateGuard] = None,
) -> ApplyReport:
    """Create the planned commits.

    For each commit: stage its files, skip it if nothing was staged, refuse
    it if the staged patch repeats a recent commit, then sanitize the
    message and commit. Successful commits get their hash recorded on the
    plan.

    Args:
        plan: The normalized plan (mutated: messages and hashes are updated).
        repo: The repository to commit into.
        preset: Style preset used when validating messages.
        guard: Duplicate guard; a default one is built and loaded if None.

    Returns:
        An ApplyReport listing created and skipped commits.

    Raises:
        PlanPreconditionError: If a commit has no files or an empty message.
        DuplicatePatchError: If a staged patch matches a recent commit.
        GitError: If a git command fails.
    """
    if guard is None:
        guard = DuplicateGuard(repo)
    # Recent patch ids are computed once, before anything is committed
    guard.load()

    validator = CommitMessageValidator(preset)
    report = ApplyReport()

    for index, commit in enumerate(plan.commits, start=1):
        if not commit.files:
            raise PlanPreconditionError(
                f"Commit #{index} has no files; refusing to continue",
                commit_index=index,
            )

        repo.stage(commit.files)

        if not repo.has_staged_changes():
            typer.echo(
                f"Skipping commit #{index} (no staged changes for selected files)",
                err=True,
            )
            report.skipped.append(index)
            continue

        if guard.is_duplicate(repo.staged_diff()):
            repo.reset_index()
            raise DuplicatePatchError(
                f"Refusing to create commit #{index}: staged diff matches a recent commit "
                "(duplicate patch detected)",
                commit_index=index,
            )

        message = validator.auto_sanitize(commit.message)
        result = validator.validate(message)
        validator.print_validation(message, result)
        if not message:
            repo.reset_index()
            raise PlanPreconditionError(
                f"Commit #{index} has an empty message; refusing to continue",
                commit_index=index,
            )
        commit.message = message

        repo.commit(render_commit_message(message, commit.description))
        commit.hash = repo.head()
        report.created.append((index, commit.hash))

    return report
