"""Duplicate-patch guard.

Refuses to re-create a change that already landed in one of the most recent
commits, comparing git patch ids so that line-offset drift doesn't matter.
The window is recomputed on every load(); nothing is persisted.
"""

from commitcraft.config import DEFAULT_DUPLICATE_MAX_BYTES, DEFAULT_DUPLICATE_WINDOW
from commitcraft.git.repository import GitRepository


class DuplicateGuard:
    """Patch-id membership test against the last `window` commits."""

    def __init__(
        self,
        repo: GitRepository,
        window: int = DEFAULT_DUPLICATE_WINDOW,
        max_patch_bytes: int = DEFAULT_DUPLICATE_MAX_BYTES,
    ):
        self.repo = repo
        self.window = window
        self.max_patch_bytes = max_patch_bytes
        self._recent_ids: set[str] = set()

    def load(self) -> "DuplicateGuard":
        """Recompute the patch ids of the recent commits."""
        self._recent_ids = self.repo.recent_patch_ids(self.window)
        return self

    @property
    def recent_ids(self) -> set[str]:
        return set(self._recent_ids)

    def is_duplicate(self, staged_patch: str) -> bool:
        """Whether staged_patch repeats one of the recent commits.

        Patches larger than max_patch_bytes are never fingerprinted and so
        never count as duplicates.
        """
        if len(staged_patch.encode("utf-8")) > self.max_patch_bytes:
            return False

        pid = self.repo.patch_id(staged_patch)
        if pid is None:
            return False
        return pid in self._recent_ids
