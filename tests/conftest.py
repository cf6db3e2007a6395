"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from pathlib import Path

import pytest

from commitcraft.git.repository import GitRepository


def git(repo_dir: Path, *args: str) -> str:
    """Run a git command in repo_dir and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_dir,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def run_git():
    """The git() helper, for tests that shell out to git directly."""
    return git


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, mocker):
    """Point ~/.commitcraft at a throwaway directory for every test."""
    config_dir = tmp_path / ".commitcraft"
    mocker.patch("commitcraft.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def temp_repo(tmp_path):
    """Create a temporary git repository with one initial commit."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"],
        cwd=repo_dir,
        capture_output=True,
    )

    (repo_dir / "README.md").write_text("# Test Repo\n")
    subprocess.run(["git", "add", "README.md"], cwd=repo_dir, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=repo_dir,
        capture_output=True,
    )

    return repo_dir


@pytest.fixture
def repo(temp_repo):
    """GitRepository wrapper around temp_repo."""
    return GitRepository(temp_repo)


@pytest.fixture
def sample_status():
    """Sample `git status --porcelain` output."""
    return " M src/lib.rs\nA  README.md\nR  old.txt -> new.txt\n?? zzz.tmp\n"


@pytest.fixture
def sample_plan_response():
    """Sample provider answer wrapped in a markdown fence."""
    return """Here is the plan:
```json
{
  "commits": [
    {
      "message": "feat: add greeting helpers",
      "files": ["src/"],
      "description": {
        "summary": "Adds greeting helpers.",
        "changes": ["Add hello()", "Add goodbye()"],
        "impact": {"level": "low", "explanation": "New functions only", "affected_areas": ["src"]},
        "breaking_changes": []
      }
    },
    {
      "message": "docs: describe greetings",
      "files": ["README.md"],
      "commands": []
    }
  ]
}
```"""
