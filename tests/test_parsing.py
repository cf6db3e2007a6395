"""Tests for JSON extraction and plan decoding."""

import pytest

from commitcraft.llm.exceptions import JSONParseError
from commitcraft.llm.parsing import extract_json
from commitcraft.plan.parser import parse_plan_response


class TestExtractJson:
    """Tests for extract_json function."""

    def test_bare_object_unchanged(self):
        """Test that bare JSON comes back as-is."""
        text = '{"commits":[]}'
        assert extract_json(text) == text

    def test_idempotent(self):
        """Test that extracting twice gives the same result."""
        text = '  {"commits":[{"message":"x","files":["a"]}]}  '
        once = extract_json(text)
        assert extract_json(once) == once

    def test_strips_plain_fence(self):
        """Test stripping a ``` fenced block."""
        assert extract_json('```\n{"commits":[]}\n```') == '{"commits":[]}'

    def test_strips_json_fence(self):
        """Test stripping a ```json fenced block."""
        assert extract_json('```json\n{"commits":[]}\n```') == '{"commits":[]}'

    def test_fence_without_newline_has_no_candidate(self):
        """Test that a fence with no newline yields None."""
        assert extract_json('```{"commits":[]}```') is None

    def test_fence_without_closing(self):
        """Test an opening fence with no closing fence."""
        assert extract_json('```json\n{"a": 1}') == '{"a": 1}'

    def test_surrounding_prose(self):
        """Test that prose before and after the JSON is dropped."""
        text = 'Sure! Here you go: {"commits": []} Hope this helps.'
        assert extract_json(text) == '{"commits": []}'

    def test_array(self):
        """Test extracting a bare array."""
        text = 'Plan: [{"message": "x", "files": []}]'
        assert extract_json(text) == '[{"message": "x", "files": []}]'

    def test_earliest_start_and_latest_end(self):
        """Test that the span runs from the first opener to the last closer."""
        text = 'x [1] y {"a": 2} z'
        assert extract_json(text) == '[1] y {"a": 2}'

    def test_no_json(self):
        """Test text without any braces."""
        assert extract_json("no json here") is None

    def test_end_before_start(self):
        """Test closers that precede openers."""
        assert extract_json("} then {") is None

    def test_empty(self):
        """Test empty input."""
        assert extract_json("   ") is None


class TestParsePlanResponse:
    """Tests for parse_plan_response function."""

    def test_object_form(self):
        """Test the documented {"commits": [...]} shape."""
        plan = parse_plan_response('{"commits":[{"message":"feat: x","files":["a.txt"]}]}')

        assert len(plan.commits) == 1
        assert plan.commits[0].message == "feat: x"
        assert plan.commits[0].files == ["a.txt"]
        assert plan.commits[0].commands == []
        assert plan.commits[0].hash is None

    def test_bare_array_is_wrapped(self):
        """Test that a bare array of commits is accepted."""
        plan = parse_plan_response('[{"message":"fix: y","files":["b.txt"]}]')

        assert len(plan.commits) == 1
        assert plan.commits[0].message == "fix: y"

    def test_fenced_with_description(self, sample_plan_response):
        """Test a fenced answer carrying descriptions."""
        plan = parse_plan_response(sample_plan_response)

        assert len(plan.commits) == 2
        first = plan.commits[0]
        assert first.description is not None
        assert first.description.summary == "Adds greeting helpers."
        assert first.description.impact.level == "low"
        assert first.description.impact.affected_areas == ["src"]
        assert plan.commits[1].description is None

    def test_invalid_raises_with_raw_text(self):
        """Test that undecodable text raises JSONParseError with the raw text."""
        raw = "I could not produce a plan, sorry."

        with pytest.raises(JSONParseError) as exc_info:
            parse_plan_response(raw)

        assert exc_info.value.raw_response == raw
        assert raw in str(exc_info.value)

    def test_wrong_shape_raises(self):
        """Test JSON that is neither accepted shape."""
        with pytest.raises(JSONParseError):
            parse_plan_response('{"plan": []}')

    def test_missing_files_raises(self):
        """Test that a commit without files is rejected at decode time."""
        with pytest.raises(JSONParseError):
            parse_plan_response('{"commits":[{"message":"x"}]}')
