"""Cache file path utilities for commitcraft.

Contains functions for getting paths to cache files:
- get_cache_dir: Get the .git/commitcraft_cache directory
- get_plan_cache_file: Get path to the cached plan record
- get_applied_plan_file: Get path to the last applied plan
"""

from pathlib import Path

CACHE_DIR_NAME = "commitcraft_cache"


def get_cache_dir(repo_root: Path) -> Path:
    """Return the cache directory, creating it if needed.

    The cache lives inside .git so it is never picked up by git status.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to <repo>/.git/commitcraft_cache.
    """
    cache_dir = Path(repo_root) / ".git" / CACHE_DIR_NAME
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


def get_plan_cache_file(repo_root: Path) -> Path:
    """Return path to the cached plan record.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to commit_plan.json.
    """
    return get_cache_dir(repo_root) / "commit_plan.json"


def get_applied_plan_file(repo_root: Path) -> Path:
    """Return path to the most recently applied plan.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to latest_plan.json.
    """
    return get_cache_dir(repo_root) / "latest_plan.json"
