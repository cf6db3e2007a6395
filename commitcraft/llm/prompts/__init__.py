"""Prompt templates for commit plan generation.

- system: The fixed system prompt shared by all providers
- plan: The user prompt embedding status, diff and log snapshots
"""

from commitcraft.llm.prompts.system import PLAN_SYSTEM_PROMPT
from commitcraft.llm.prompts.plan import (
    PLAN_PROMPT_TEMPLATE,
    build_plan_prompt,
)


__all__ = [
    "PLAN_SYSTEM_PROMPT",
    "PLAN_PROMPT_TEMPLATE",
    "build_plan_prompt",
]
