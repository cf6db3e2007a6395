"""Plan cache operations for commitcraft.

Contains functions for caching generated plans:
- cache_plan: Store the plan generated for a diff
- load_cached_plan: Return the stored plan if it is fresh and for the same diff
- clear_cache: Remove the stored plan
- cache_applied_plan: Record the last applied plan (with hashes)
- load_applied_plan: Read the last applied plan back

Cache failures never break planning: the public functions report the
problem on stderr and carry on as if there were no cache.
"""

import time
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from commitcraft.cache.exceptions import CacheIOError
from commitcraft.cache.models import CachedPlan
from commitcraft.cache.paths import get_applied_plan_file, get_plan_cache_file
from commitcraft.cache.utils import hash_diff
from commitcraft.config import DEFAULT_CACHE_TTL
from commitcraft.plan.models import CommitPlan


def _warn(error: CacheIOError) -> None:
    typer.echo(f"Warning: {error}", err=True)


def _write(path: Path, text: str) -> None:
    try:
        path.write_text(text)
    except OSError as e:
        raise CacheIOError(f"Failed to write cache to {path}: {e}") from e


def _read_record(path: Path) -> Optional[CachedPlan]:
    if not path.exists():
        return None
    try:
        return CachedPlan.model_validate_json(path.read_text())
    except (OSError, ValidationError) as e:
        raise CacheIOError(f"Failed to read cache from {path}: {e}") from e


def cache_plan(repo_root: Path, plan: CommitPlan, diff: str) -> None:
    """Save a freshly generated plan, replacing any previous record.

    Args:
        repo_root: The root directory of the git repository.
        plan: The generated plan.
        diff: The fingerprint text the plan was generated for (the
            generator passes PlanSnapshot.cache_key, status plus diff).
    """
    record = CachedPlan(
        timestamp=int(time.time()),
        diff_hash=hash_diff(diff),
        plan=plan,
    )
    try:
        _write(get_plan_cache_file(repo_root), record.model_dump_json(indent=2))
    except CacheIOError as e:
        _warn(e)
    except OSError as e:
        _warn(CacheIOError(f"Failed to prepare cache directory: {e}"))


def load_cached_plan(
    repo_root: Path,
    diff: str,
    ttl: int = DEFAULT_CACHE_TTL,
) -> Optional[CommitPlan]:
    """Return the cached plan if it was generated for this diff recently.

    Args:
        repo_root: The root directory of the git repository.
        diff: Fingerprint text to match; the generator passes
            PlanSnapshot.cache_key (status plus diff), not the raw diff.
        ttl: Maximum record age in seconds.

    Returns:
        The cached plan, or None on a miss (absent, stale, different diff,
        or unreadable record).
    """
    try:
        record = _read_record(get_plan_cache_file(repo_root))
    except CacheIOError as e:
        _warn(e)
        return None
    except OSError as e:
        _warn(CacheIOError(str(e)))
        return None

    if record is None:
        return None

    if record.diff_hash != hash_diff(diff):
        return None

    age = int(time.time()) - record.timestamp
    if age > ttl:
        return None

    return record.plan


def clear_cache(repo_root: Path) -> bool:
    """Remove the cached plan.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        True if a record was removed.
    """
    try:
        cache_file = get_plan_cache_file(repo_root)
        if not cache_file.exists():
            return False
        cache_file.unlink()
    except OSError as e:
        _warn(CacheIOError(f"Failed to clear cache: {e}"))
        return False
    return True


def cache_applied_plan(repo_root: Path, plan: CommitPlan) -> None:
    """Record the plan that was just applied, including commit hashes.

    Args:
        repo_root: The root directory of the git repository.
        plan: The applied plan.
    """
    try:
        _write(get_applied_plan_file(repo_root), plan.to_json())
    except CacheIOError as e:
        _warn(e)
    except OSError as e:
        _warn(CacheIOError(f"Failed to prepare cache directory: {e}"))


def load_applied_plan(repo_root: Path) -> Optional[CommitPlan]:
    """Return the most recently applied plan, if one was recorded."""
    try:
        path = get_applied_plan_file(repo_root)
        if not path.exists():
            return None
        return CommitPlan.model_validate_json(path.read_text())
    except (OSError, ValidationError) as e:
        _warn(CacheIOError(f"Failed to read applied plan: {e}"))
        return None
