"""Decode a model response into a CommitPlan.

Accepts either the documented {"commits": [...]} object or a bare array
of commits, after isolating the JSON span with extract_json().
"""

from pydantic import TypeAdapter, ValidationError

from commitcraft.llm.exceptions import JSONParseError
from commitcraft.llm.parsing import extract_json
from commitcraft.plan.models import CommitPlan, PlannedCommit

_COMMIT_LIST = TypeAdapter(list[PlannedCommit])


def parse_plan_response(raw_response: str) -> CommitPlan:
    """Parse the provider text as a commit plan.

    Args:
        raw_response: The raw text returned by the completion provider.

    Returns:
        The decoded CommitPlan.

    Raises:
        JSONParseError: If neither accepted shape can be decoded.
    """
    candidate = extract_json(raw_response) or raw_response

    try:
        return CommitPlan.model_validate_json(candidate)
    except ValidationError:
        pass

    try:
        return CommitPlan(commits=_COMMIT_LIST.validate_json(candidate))
    except ValidationError as e:
        raise JSONParseError(
            f"Failed to parse provider response as a commit plan.\n"
            f"Error: {e}\n"
            f"Raw response:\n{raw_response}",
            raw_response=raw_response,
        )
