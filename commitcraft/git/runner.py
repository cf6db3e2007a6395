"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the enclosing git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitcraft.git.exceptions import GitError, NotAGitRepositoryError


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    input: Optional[str] = None,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the process cwd).
        input: Text fed to git's stdin.
        strip: Whether to strip surrounding whitespace from stdout. Patches
            and porcelain output must be read unstripped.

    Returns:
        The stdout of the git command. Bytes that aren't valid UTF-8 (e.g.
        latin-1 file contents in a diff) are replaced with U+FFFD.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            input=input,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        details = (e.stderr or "").strip() or (e.stdout or "").strip() or "<no output from git>"
        raise GitError(
            f"Git command failed: git {' '.join(args)} (exit code {e.returncode})\n{details}"
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout


def get_repo_root(path: Optional[Path] = None) -> Path:
    """Get the root directory of the git repository containing path.

    Args:
        path: Any directory inside the repository (defaults to cwd).

    Returns:
        Path to the repository root.

    Raises:
        NotAGitRepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=path)
    except GitError:
        raise NotAGitRepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
    return Path(root)
