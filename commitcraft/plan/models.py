"""Data models for commit plans.

Contains:
- ImpactInfo: Impact assessment attached to a commit description
- CommitDescription: Structured rationale for a planned commit
- PlannedCommit: A single commit in the plan
- CommitPlan: The ordered list of commits to create
"""

from typing import Optional

from pydantic import BaseModel, Field, model_serializer


class ImpactInfo(BaseModel):
    """How far-reaching a change is."""

    level: str
    explanation: str = ""
    affected_areas: list[str] = Field(default_factory=list)


class CommitDescription(BaseModel):
    """Structured rationale for a planned commit."""

    summary: str = ""
    changes: list[str] = Field(default_factory=list)
    impact: Optional[ImpactInfo] = None
    breaking_changes: list[str] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_missing_impact(self, handler):
        data = handler(self)
        if self.impact is None:
            data.pop("impact", None)
        return data


class PlannedCommit(BaseModel):
    """A single commit in the plan.

    `hash` is only set once the commit has been created.
    """

    message: str
    files: list[str]
    commands: list[str] = Field(default_factory=list)
    hash: Optional[str] = None
    description: Optional[CommitDescription] = None

    @model_serializer(mode="wrap")
    def _omit_empty_fields(self, handler):
        data = handler(self)
        if not self.commands:
            data.pop("commands", None)
        if self.hash is None:
            data.pop("hash", None)
        if self.description is None:
            data.pop("description", None)
        return data


class CommitPlan(BaseModel):
    """An ordered commit plan. List order is the application order."""

    commits: list[PlannedCommit]

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON (2-space indent)."""
        return self.model_dump_json(indent=2)
