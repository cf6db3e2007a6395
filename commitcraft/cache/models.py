"""Cache data models for commitcraft.

Contains:
- CachedPlan: The single cached plan record of a repository
"""

from pydantic import BaseModel

from commitcraft.plan.models import CommitPlan


class CachedPlan(BaseModel):
    """A generated plan together with the diff it was generated for."""

    timestamp: int  # Unix seconds
    diff_hash: str
    plan: CommitPlan
