"""Commit plan generation.

Snapshots the working tree, asks the completion provider for a plan and
decodes it. The plan cache wraps the model call: an unchanged working
tree reuses the stored plan instead of asking again.

Contains:
- PlanSnapshot: Status, diff and log captured from the repository
- GenerationResult: The plan plus how it was obtained
- take_snapshot: Capture the snapshot the prompt is built from
- request_plan: One provider round trip, prompt to CommitPlan
- generate_plan: Cached plan generation for a repository
"""

from dataclasses import dataclass, field
from typing import Optional

import typer

from commitcraft.cache.plan import cache_plan, load_cached_plan
from commitcraft.config import DEFAULT_LOG_ENTRIES, Settings
from commitcraft.git.diff import filter_diff_files, truncate_diff
from commitcraft.git.exceptions import GitError
from commitcraft.git.repository import GitRepository
from commitcraft.git.status import files_from_status_porcelain
from commitcraft.llm import get_provider
from commitcraft.llm.base import BaseCompletionProvider
from commitcraft.llm.prompts import PLAN_SYSTEM_PROMPT, build_plan_prompt
from commitcraft.plan.models import CommitPlan
from commitcraft.plan.parser import parse_plan_response


@dataclass
class PlanSnapshot:
    """Working tree state a plan is generated from."""

    status: str
    diff: str
    log: str
    changed_files: list[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def is_clean(self) -> bool:
        return not self.status.strip()

    @property
    def cache_key(self) -> str:
        # Untracked files only show up in status, so both parts are keyed
        return f"{self.status}\n{self.diff}"


@dataclass
class GenerationResult:
    """A generated plan and where it came from."""

    plan: CommitPlan
    snapshot: PlanSnapshot
    from_cache: bool = False


def take_snapshot(
    repo: GitRepository,
    max_diff_chars: int,
    log_entries: int = DEFAULT_LOG_ENTRIES,
) -> PlanSnapshot:
    """Capture status, diff and recent log.

    Lock, binary and generated files are left out of the diff (they still
    appear in the status). A diff above max_diff_chars is truncated.
    A log failure (e.g. a repository without commits) only warns.

    Args:
        repo: The repository to read.
        max_diff_chars: Diff size budget in characters.
        log_entries: How many log lines to include.

    Returns:
        The PlanSnapshot.
    """
    status = repo.status()
    changed_files = files_from_status_porcelain(status)

    diff_files = filter_diff_files(changed_files)
    if len(diff_files) == len(changed_files):
        diff = repo.diff()
    else:
        diff = repo.diff(diff_files)

    diff, truncated = truncate_diff(diff, max_diff_chars)

    try:
        log = repo.recent_log(log_entries)
    except GitError as e:
        typer.echo(f"Warning: unable to read git log (continuing without it): {e}", err=True)
        log = ""

    return PlanSnapshot(
        status=status,
        diff=diff,
        log=log,
        changed_files=changed_files,
        truncated=truncated,
    )


def request_plan(
    provider: BaseCompletionProvider,
    model: str,
    snapshot: PlanSnapshot,
    settings: Optional[Settings] = None,
) -> CommitPlan:
    """Ask the provider for a plan and decode the answer.

    Args:
        provider: The completion provider.
        model: Model identifier passed to the provider.
        snapshot: Working tree snapshot.
        settings: Style and language preferences (defaults if None).

    Returns:
        The decoded, not yet normalized, CommitPlan.

    Raises:
        LLMError: If the provider call fails or the answer can't be decoded.
    """
    settings = settings or Settings()
    prompt = build_plan_prompt(
        snapshot.status,
        snapshot.diff,
        snapshot.log,
        style=settings.style,
        language=settings.language,
    )
    text = provider.generate(model, PLAN_SYSTEM_PROMPT, prompt)
    return parse_plan_response(text)


def generate_plan(
    repo: GitRepository,
    settings: Settings,
    provider: Optional[BaseCompletionProvider] = None,
    regenerate: bool = False,
) -> GenerationResult:
    """Produce a plan for the repository's pending changes.

    The provider is only created (and its credential only resolved) on a
    cache miss.

    Args:
        repo: The repository to plan for.
        settings: Effective settings (provider, model, limits, style).
        provider: Provider to use instead of the configured one.
        regenerate: Ignore any cached plan.

    Returns:
        GenerationResult with the raw (not yet normalized) plan. For a
        clean working tree the plan has no commits and no call is made.
    """
    snapshot = take_snapshot(repo, settings.max_diff_chars)
    if snapshot.is_clean:
        return GenerationResult(plan=CommitPlan(commits=[]), snapshot=snapshot)

    if snapshot.truncated:
        typer.echo(
            f"Warning: diff was truncated to {settings.max_diff_chars} characters "
            "because it is extremely large.",
            err=True,
        )

    if not regenerate:
        cached = load_cached_plan(repo.root, snapshot.cache_key, ttl=settings.cache_ttl)
        if cached is not None:
            return GenerationResult(plan=cached, snapshot=snapshot, from_cache=True)

    if provider is None:
        provider = get_provider(
            settings.provider,
            base_url=settings.base_url,
            request_timeout=settings.request_timeout,
        )

    plan = request_plan(provider, settings.model, snapshot, settings)
    cache_plan(repo.root, plan, snapshot.cache_key)
    return GenerationResult(plan=plan, snapshot=snapshot)
