"""Plan-related exception classes.

Contains all exception classes for planning and applying commits:
- PlanError: Base exception for plan-related errors
- PlanPreconditionError: A planned commit can't be applied as written
- DuplicatePatchError: A staged change repeats a recent commit
- PlanFileError: A plan file can't be read, decoded or written
"""

from typing import Optional

from commitcraft.exceptions import CommitcraftError


class PlanError(CommitcraftError):
    """Base exception for plan-related errors."""

    pass


class PlanPreconditionError(PlanError):
    """Raised when a planned commit has no files or an empty message."""

    def __init__(self, message: str, commit_index: Optional[int] = None):
        super().__init__(message)
        self.commit_index = commit_index


class DuplicatePatchError(PlanError):
    """Raised when a staged patch matches one of the recent commits."""

    def __init__(self, message: str, commit_index: Optional[int] = None):
        super().__init__(message)
        self.commit_index = commit_index


class PlanFileError(PlanError):
    """Raised when a plan file is unreadable, invalid or unwritable."""

    pass
