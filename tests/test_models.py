"""Tests for plan models, plan files and rendering."""

import json

import pytest
from pydantic import ValidationError

from commitcraft.plan.exceptions import PlanFileError
from commitcraft.plan.files import load_plan_file, save_plan_file
from commitcraft.plan.models import (
    CommitDescription,
    CommitPlan,
    ImpactInfo,
    PlannedCommit,
)
from commitcraft.plan.parser import parse_plan_response
from commitcraft.plan.render import (
    format_description_body,
    print_plan_human,
    render_commit_message,
)


class TestSerialization:
    """Tests for model serialization."""

    def test_optional_fields_omitted(self):
        """Test that empty commands and unset hash/description are left out."""
        plan = CommitPlan(commits=[PlannedCommit(message="x", files=["a"])])

        data = json.loads(plan.to_json())

        assert data == {"commits": [{"message": "x", "files": ["a"]}]}

    def test_populated_fields_written(self):
        """Test that set fields are written."""
        commit = PlannedCommit(
            message="x",
            files=["a"],
            commands=["git add -- a"],
            hash="abc",
            description=CommitDescription(summary="s"),
        )

        data = json.loads(CommitPlan(commits=[commit]).to_json())["commits"][0]

        assert data["commands"] == ["git add -- a"]
        assert data["hash"] == "abc"
        assert data["description"] == {"summary": "s", "changes": [], "breaking_changes": []}

    def test_two_space_indent(self):
        """Test the pretty-printed layout."""
        text = CommitPlan(commits=[]).to_json()

        assert text == '{\n  "commits": []\n}'

    def test_commits_required(self):
        """Test that the commits key is mandatory."""
        with pytest.raises(ValidationError):
            CommitPlan.model_validate_json("{}")

    def test_description_round_trip(self, sample_plan_response):
        """Test that a parsed description survives serialization."""
        plan = parse_plan_response(sample_plan_response)

        again = CommitPlan.model_validate_json(plan.to_json())

        assert again == plan
        assert again.commits[0].description.impact.level == "low"


class TestPlanFiles:
    """Tests for load_plan_file / save_plan_file."""

    def test_save_and_load(self, temp_dir):
        """Test writing and reading a plan file."""
        path = temp_dir / "plan.json"
        plan = CommitPlan(commits=[PlannedCommit(message="x", files=["a"])])

        save_plan_file(path, plan)

        assert load_plan_file(path) == plan
        assert path.read_text() == plan.to_json() + "\n"

    def test_missing_file(self, temp_dir):
        """Test a path that doesn't exist."""
        with pytest.raises(PlanFileError):
            load_plan_file(temp_dir / "missing.json")

    def test_invalid_file(self, temp_dir):
        """Test a file that isn't a plan."""
        path = temp_dir / "plan.json"
        path.write_text('{"commits": "nope"}')

        with pytest.raises(PlanFileError):
            load_plan_file(path)


class TestFormatDescriptionBody:
    """Tests for format_description_body function."""

    def test_full_body(self):
        """Test all sections in order."""
        description = CommitDescription(
            summary="Adds retries.",
            changes=["Wrap requests", "Add backoff"],
            impact=ImpactInfo(
                level="medium",
                explanation="Uploads survive failures",
                affected_areas=["client", "config"],
            ),
            breaking_changes=["Upload() raises on final failure"],
        )

        assert format_description_body(description) == (
            "Adds retries.\n\n"
            "Changes:\n- Wrap requests\n- Add backoff\n\n"
            "Impact: MEDIUM - Uploads survive failures\n"
            "Affected areas: client, config\n\n"
            "BREAKING CHANGES:\n- Upload() raises on final failure"
        )

    def test_impact_without_explanation(self):
        """Test the headline when there is no explanation."""
        description = CommitDescription(impact=ImpactInfo(level="high"))

        assert format_description_body(description) == "Impact: HIGH"

    def test_empty_description(self):
        """Test that an empty description renders nothing."""
        assert format_description_body(CommitDescription()) == ""


class TestRenderCommitMessage:
    """Tests for render_commit_message function."""

    def test_without_description(self):
        """Test a bare message."""
        assert render_commit_message("feat: x", None) == "feat: x"

    def test_with_description(self):
        """Test one blank line between message and body."""
        result = render_commit_message("feat: x", CommitDescription(summary="Why."))

        assert result == "feat: x\n\nWhy."

    def test_empty_description(self):
        """Test that an empty body adds nothing."""
        assert render_commit_message("feat: x", CommitDescription()) == "feat: x"


class TestPrintPlanHuman:
    """Tests for print_plan_human function."""

    def test_layout(self, capsys):
        """Test the per-commit display."""
        plan = CommitPlan(
            commits=[
                PlannedCommit(
                    message="feat: x",
                    files=["a.txt"],
                    commands=["git add -- a.txt"],
                    hash="abc123",
                    description=CommitDescription(summary="Why."),
                )
            ]
        )

        print_plan_human(plan)

        out = capsys.readouterr().out
        assert "Commit #1 - 1 file(s)" in out
        assert "Message: feat: x" in out
        assert "Hash: abc123" in out
        assert "-> a.txt" in out
        assert "$ git add -- a.txt" in out
        assert "Why." in out
