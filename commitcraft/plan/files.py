"""Plan file read/write helpers."""

from pathlib import Path

from pydantic import ValidationError

from commitcraft.plan.exceptions import PlanFileError
from commitcraft.plan.models import CommitPlan


def load_plan_file(path: Path) -> CommitPlan:
    """Read a plan file written by `commitcraft plan --out`.

    Raises:
        PlanFileError: If the file can't be read or isn't a valid plan.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise PlanFileError(f"Failed to read plan file {path}: {e}")

    try:
        return CommitPlan.model_validate_json(text)
    except ValidationError as e:
        raise PlanFileError(f"Invalid plan file {path}:\n{e}")


def save_plan_file(path: Path, plan: CommitPlan) -> None:
    """Write a plan as pretty-printed JSON.

    Raises:
        PlanFileError: If the file can't be written.
    """
    path = Path(path)
    try:
        path.write_text(plan.to_json() + "\n")
    except OSError as e:
        raise PlanFileError(f"Failed to write plan to {path}: {e}")
