"""Git access layer for commitcraft.

This package provides:
- exceptions: GitError, NotAGitRepositoryError
- runner: _run_git_command, get_repo_root
- status: files_from_status_porcelain, unquote_path
- diff: DEFAULT_DIFF_EXCLUDE_PATTERNS, filter_diff_files, truncate_diff
- repository: GitRepository
"""

# Exceptions
from commitcraft.git.exceptions import (
    GitError,
    NotAGitRepositoryError,
)

# Runner utilities
from commitcraft.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status parsing
from commitcraft.git.status import files_from_status_porcelain, unquote_path

# Diff utilities
from commitcraft.git.diff import (
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
    _should_exclude_file,
    filter_diff_files,
    truncate_diff,
)

# Repository collaborator
from commitcraft.git.repository import GitRepository


__all__ = [
    # Exceptions
    "GitError",
    "NotAGitRepositoryError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status
    "files_from_status_porcelain",
    "unquote_path",
    # Diff
    "DEFAULT_DIFF_EXCLUDE_PATTERNS",
    "_should_exclude_file",
    "filter_diff_files",
    "truncate_diff",
    # Repository
    "GitRepository",
]
