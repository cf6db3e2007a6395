"""Version-control collaborator used by the planner and the applier.

Every git invocation the rest of commitcraft needs goes through
GitRepository, which pins the working directory to the repository root.
"""

from pathlib import Path
from typing import Optional

from commitcraft.git.exceptions import GitError
from commitcraft.git.runner import _run_git_command, get_repo_root


class GitRepository:
    """A git working tree rooted at `root`."""

    def __init__(self, root: Path):
        self.root = Path(root)

    @classmethod
    def discover(cls, path: Optional[Path] = None) -> "GitRepository":
        """Locate the repository enclosing path (or the cwd).

        Raises:
            NotAGitRepositoryError: If path is not inside a git repository.
        """
        return cls(get_repo_root(path))

    def _git(self, args: list[str], input: Optional[str] = None, strip: bool = True) -> str:
        return _run_git_command(args, cwd=self.root, input=input, strip=strip)

    @property
    def git_dir(self) -> Path:
        """Absolute path of the repository's .git directory."""
        git_dir = Path(self._git(["rev-parse", "--git-dir"]))
        if not git_dir.is_absolute():
            git_dir = self.root / git_dir
        return git_dir

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def status(self) -> str:
        """Porcelain v1 status of the working tree."""
        return self._git(["status", "--porcelain"], strip=False)

    def diff(self, paths: Optional[list[str]] = None) -> str:
        """Unstaged diff, optionally limited to paths.

        Args:
            paths: Restrict the diff to these paths. An empty list yields "".

        Returns:
            The diff text.
        """
        if paths is None:
            return self._git(["diff"], strip=False)
        if not paths:
            return ""
        return self._git(["diff", "--"] + list(paths), strip=False)

    def recent_log(self, n: int = 20) -> str:
        """One-line log of the last n commits."""
        return self._git(["log", "-n", str(n), "--pretty=oneline"])

    def head(self) -> str:
        """Full hash of HEAD."""
        return self._git(["rev-parse", "HEAD"])

    def has_commits(self) -> bool:
        """Whether HEAD points at a commit (False in a freshly initialised repo)."""
        try:
            self._git(["rev-parse", "--verify", "--quiet", "HEAD"])
        except GitError:
            return False
        return True

    # ------------------------------------------------------------------
    # Index and commits
    # ------------------------------------------------------------------

    def stage(self, files: list[str]) -> None:
        """Stage exactly the given paths (`git add -- files`)."""
        self._git(["add", "--"] + list(files))

    def has_staged_changes(self) -> bool:
        """Whether the index differs from HEAD."""
        return bool(self._git(["diff", "--cached", "--name-only", "--"]))

    def staged_diff(self) -> str:
        """The staged patch (`git diff --cached`)."""
        return self._git(["diff", "--cached"], strip=False)

    def commit(self, message: str) -> None:
        """Commit the index with the given message."""
        self._git(["commit", "-m", message])

    def reset_index(self) -> None:
        """Unstage everything, leaving the working tree untouched."""
        self._git(["reset"])

    # ------------------------------------------------------------------
    # Patch identity
    # ------------------------------------------------------------------

    def recent_commit_hashes(self, n: int) -> list[str]:
        """Hashes of the last n commits reachable from HEAD, newest first."""
        if not self.has_commits():
            return []
        out = self._git(["log", "-n", str(n), "--pretty=%H"])
        return [line.strip() for line in out.splitlines() if line.strip()]

    def commit_patch(self, commit_hash: str) -> str:
        """The patch introduced by a commit, without the header."""
        return self._git(["show", commit_hash, "--pretty=format:"], strip=False)

    def patch_id(self, patch: str) -> Optional[str]:
        """Stable patch id of a patch, or None for an empty patch.

        Args:
            patch: Unified diff text.

        Returns:
            The first token of `git patch-id --stable` output, or None.
        """
        if not patch.strip():
            return None

        out = self._git(["patch-id", "--stable"], input=patch)
        lines = out.splitlines()
        if not lines or not lines[0].strip():
            return None
        return lines[0].split()[0]

    def recent_patch_ids(self, n: int) -> set[str]:
        """Patch ids of the last n commits (commits with no patch are skipped)."""
        ids = set()
        for commit_hash in self.recent_commit_hashes(n):
            pid = self.patch_id(self.commit_patch(commit_hash))
            if pid:
                ids.add(pid)
        return ids
