"""Tests for the duplicate guard and the plan applier."""

import pytest

from commitcraft.config import StylePreset
from commitcraft.plan.applier import ApplyReport, apply_plan
from commitcraft.plan.exceptions import DuplicatePatchError, PlanPreconditionError
from commitcraft.plan.guard import DuplicateGuard
from commitcraft.plan.models import (
    CommitDescription,
    CommitPlan,
    ImpactInfo,
    PlannedCommit,
)
from commitcraft.plan.normalize import normalize_plan_files
from commitcraft.plan.parser import parse_plan_response


def _commit_count(run_git, repo_dir):
    return int(run_git(repo_dir, "rev-list", "--count", "HEAD").strip())


class TestDuplicateGuard:
    """Tests for DuplicateGuard."""

    def _commit_file(self, repo, temp_repo, name, content):
        (temp_repo / name).write_text(content)
        repo.stage([name])
        repo.commit(f"Add {name}")

    def test_detects_recent_patch(self, repo, temp_repo, run_git):
        """Test that re-staging an already committed change is detected."""
        self._commit_file(repo, temp_repo, "a.txt", "a\n")
        patch = repo.commit_patch(repo.head())

        guard = DuplicateGuard(repo).load()

        assert guard.is_duplicate(patch)

    def test_new_patch_not_duplicate(self, repo, temp_repo):
        """Test a genuinely new change."""
        guard = DuplicateGuard(repo).load()
        (temp_repo / "b.txt").write_text("b\n")
        repo.stage(["b.txt"])

        assert not guard.is_duplicate(repo.staged_diff())

    def test_window_bounds_lookup(self, repo, temp_repo):
        """Test that commits outside the window are not considered."""
        self._commit_file(repo, temp_repo, "a.txt", "a\n")
        old_patch = repo.commit_patch(repo.head())
        self._commit_file(repo, temp_repo, "b.txt", "b\n")

        guard = DuplicateGuard(repo, window=1).load()

        assert not guard.is_duplicate(old_patch)

    def test_oversized_patch_skipped(self, repo, temp_repo, mocker):
        """Test that patches over the byte bound are never fingerprinted."""
        self._commit_file(repo, temp_repo, "a.txt", "a\n")
        patch = repo.commit_patch(repo.head())
        guard = DuplicateGuard(repo, max_patch_bytes=10).load()
        spy = mocker.spy(repo, "patch_id")

        assert not guard.is_duplicate(patch)
        spy.assert_not_called()

    def test_empty_patch(self, repo):
        """Test that a patch without an id is not a duplicate."""
        assert not DuplicateGuard(repo).load().is_duplicate("")


class TestApplyPlan:
    """Tests for apply_plan function."""

    def test_end_to_end_two_files(self, repo, temp_repo, run_git):
        """Test a two-file plan producing one commit with a hash."""
        (temp_repo / "a.txt").write_text("a\n")
        (temp_repo / "b.txt").write_text("b\n")
        plan = parse_plan_response(
            '{"commits":[{"message":"feat: add x","files":["a.txt","b.txt"],"commands":[]}]}'
        )
        normalize_plan_files(plan, ["a.txt", "b.txt"])

        report = apply_plan(plan, repo)

        head = repo.head()
        assert plan.commits[0].hash == head
        assert report.created == [(1, head)]
        assert report.skipped == []
        files = run_git(temp_repo, "show", "--name-only", "--pretty=format:", "HEAD").split()
        assert sorted(files) == ["a.txt", "b.txt"]
        assert run_git(temp_repo, "log", "-1", "--pretty=%s").strip() == "feat: add x"

    def test_commits_in_list_order(self, repo, temp_repo, run_git):
        """Test that commits are created in plan order."""
        (temp_repo / "a.txt").write_text("a\n")
        (temp_repo / "b.txt").write_text("b\n")
        plan = CommitPlan(
            commits=[
                PlannedCommit(message="Add b", files=["b.txt"]),
                PlannedCommit(message="Add a", files=["a.txt"]),
            ]
        )

        apply_plan(plan, repo)

        subjects = run_git(temp_repo, "log", "-2", "--pretty=%s").split("\n")
        assert subjects[:2] == ["Add a", "Add b"]

    def test_empty_files_aborts_before_staging(self, repo, temp_repo, run_git):
        """Test that a commit without files stops the run untouched."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(commits=[PlannedCommit(message="Nothing", files=[])])

        with pytest.raises(PlanPreconditionError) as exc_info:
            apply_plan(plan, repo)

        assert exc_info.value.commit_index == 1
        assert "#1" in str(exc_info.value)
        assert not repo.has_staged_changes()
        assert _commit_count(run_git, temp_repo) == 1

    def test_empty_files_later_keeps_earlier_commits(self, repo, temp_repo, run_git):
        """Test non-transactional behaviour on a later failure."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(
            commits=[
                PlannedCommit(message="Add a", files=["a.txt"]),
                PlannedCommit(message="Nothing", files=[]),
            ]
        )

        with pytest.raises(PlanPreconditionError) as exc_info:
            apply_plan(plan, repo)

        assert exc_info.value.commit_index == 2
        assert _commit_count(run_git, temp_repo) == 2
        assert plan.commits[0].hash == repo.head()
        assert plan.commits[1].hash is None

    def test_no_delta_is_skipped(self, repo, temp_repo, run_git, capsys):
        """Test that a commit whose files have no changes is skipped."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(
            commits=[
                PlannedCommit(message="Touch readme", files=["README.md"]),
                PlannedCommit(message="Add a", files=["a.txt"]),
            ]
        )

        report = apply_plan(plan, repo)

        assert report.skipped == [1]
        assert [index for index, _ in report.created] == [2]
        assert plan.commits[0].hash is None
        assert "Skipping commit #1" in capsys.readouterr().err
        assert _commit_count(run_git, temp_repo) == 2

    def test_duplicate_patch_aborts_and_unstages(self, repo, temp_repo, run_git):
        """Test that re-applying a recently reverted change is refused."""
        (temp_repo / "c.txt").write_text("c\n")
        repo.stage(["c.txt"])
        repo.commit("Add c")
        run_git(temp_repo, "revert", "--no-edit", "HEAD")
        (temp_repo / "c.txt").write_text("c\n")
        before = _commit_count(run_git, temp_repo)
        plan = CommitPlan(commits=[PlannedCommit(message="Add c again", files=["c.txt"])])

        with pytest.raises(DuplicatePatchError) as exc_info:
            apply_plan(plan, repo)

        assert exc_info.value.commit_index == 1
        assert not repo.has_staged_changes()
        assert _commit_count(run_git, temp_repo) == before
        assert plan.commits[0].hash is None

    def test_sanitized_message_and_description_body(self, repo, temp_repo, run_git):
        """Test message sanitizing and the appended description body."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(
            commits=[
                PlannedCommit(
                    message='"add  feature a."',
                    files=["a.txt"],
                    description=CommitDescription(
                        summary="Adds a.",
                        changes=["Create a.txt"],
                        impact=ImpactInfo(level="low", explanation="Docs only", affected_areas=["root"]),
                        breaking_changes=["None really"],
                    ),
                )
            ]
        )

        apply_plan(plan, repo)

        assert plan.commits[0].message == "Add feature a"
        body = run_git(temp_repo, "log", "-1", "--pretty=%B")
        assert body.startswith("Add feature a\n\nAdds a.")
        assert "Changes:\n- Create a.txt" in body
        assert "Impact: LOW - Docs only" in body
        assert "Affected areas: root" in body
        assert "BREAKING CHANGES:\n- None really" in body

    def test_empty_message_is_fatal(self, repo, temp_repo, run_git):
        """Test that a message that sanitizes to nothing stops the run."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(commits=[PlannedCommit(message="   ", files=["a.txt"])])

        with pytest.raises(PlanPreconditionError) as exc_info:
            apply_plan(plan, repo)

        assert exc_info.value.commit_index == 1
        assert _commit_count(run_git, temp_repo) == 1

    def test_preset_warnings_do_not_block(self, repo, temp_repo, capsys):
        """Test that validator warnings are printed but not fatal."""
        (temp_repo / "a.txt").write_text("a\n")
        plan = CommitPlan(commits=[PlannedCommit(message="Add a", files=["a.txt"])])

        report = apply_plan(plan, repo, preset=StylePreset.CONVENTIONAL)

        assert len(report.created) == 1
        assert "Missing conventional commit prefix" in capsys.readouterr().err

    def test_custom_guard_is_used(self, repo, temp_repo, mocker):
        """Test that a provided guard is loaded and consulted."""
        (temp_repo / "a.txt").write_text("a\n")
        guard = DuplicateGuard(repo)
        mocker.patch.object(guard, "is_duplicate", return_value=True)
        plan = CommitPlan(commits=[PlannedCommit(message="Add a", files=["a.txt"])])

        with pytest.raises(DuplicatePatchError):
            apply_plan(plan, repo, guard=guard)

    def test_report_defaults(self):
        """Test an empty report."""
        report = ApplyReport()
        assert report.created == []
        assert report.skipped == []
