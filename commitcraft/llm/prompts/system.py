"""System prompt for commit plan generation.

Shared by every completion provider.
"""

PLAN_SYSTEM_PROMPT = "You are a senior software engineer. Your task is to propose a commit plan."
