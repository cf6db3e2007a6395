"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotAGitRepositoryError: Raised when the working directory is not inside a repo
"""

from commitcraft.exceptions import CommitcraftError


class GitError(CommitcraftError):
    """Custom exception for git-related errors."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass
