"""User prompt template for commit plan generation.

The three git snapshots are embedded verbatim. The schema line switches to
the extended form (with a per-commit description) when a detailed plan is
requested, and optional style/language lines steer the description text.
"""

from typing import Optional

from commitcraft.config import StylePreset

PLAN_SCHEMA_BASIC = '{"commits":[{"message":string,"files":[string],"commands":[string]}]}'

PLAN_SCHEMA_DETAILED = (
    '{"commits":[{"message":string,"files":[string],"commands":[string],'
    '"description":{"summary":string,"changes":[string],'
    '"impact":{"level":"low"|"medium"|"high","explanation":string,"affected_areas":[string]},'
    '"breaking_changes":[string]}}]}'
)

PLAN_PROMPT_TEMPLATE = """Task: Propose a commit plan for the current git working tree.
Rules:
- Output ONLY valid JSON. No markdown. No commentary.
- JSON schema: {schema}
- Group files into logical commits by feature/responsibility.
- Commit messages should be concise, imperative, and conventional (e.g. feat:, fix:, refactor:, chore:).
- Each file path must exist in git status output.
- For each commit, commands must contain EXACTLY 2 commands in this order:
  1) git add -- <files...>
  2) git commit -m "<message>"
{extra_rules}
Context:
GIT_STATUS_PORCELAIN:
{status}

GIT_DIFF:
{diff}

RECENT_GIT_LOG (for style):
{log}
"""

_STYLE_RULES = {
    StylePreset.CONVENTIONAL: (
        "- Every commit message MUST start with a conventional prefix "
        "(feat:, fix:, docs:, style:, refactor:, perf:, test:, build:, ci:, chore:, revert:)."
    ),
    StylePreset.CONVENTIONAL_EMOJIS: (
        "- Every commit message MUST start with a conventional prefix, optionally preceded "
        "by a single matching emoji (e.g. \"✨ feat: ...\", \"🐛 fix: ...\")."
    ),
    StylePreset.DETAILED: (
        "- Write a thorough description.summary (2-4 sentences) and list every notable change."
    ),
    StylePreset.CONCISE: (
        "- Keep description.summary to a single short sentence and list at most 3 changes."
    ),
}


def _extra_rules(style: Optional[StylePreset], language: Optional[str], detailed: bool) -> str:
    lines = []
    if detailed:
        lines.append(
            "- For each commit, include a description object explaining what changed and its impact."
        )
    if style is not None:
        lines.append(_STYLE_RULES[style])
    if language:
        lines.append(
            f"- Write description.summary and description.changes in {language}. "
            "Keep commit messages, file paths and commands unchanged."
        )
    return "".join(line + "\n" for line in lines)


def build_plan_prompt(
    status: str,
    diff: str,
    log: str,
    style: Optional[StylePreset] = None,
    language: Optional[str] = None,
    detailed: bool = True,
) -> str:
    """Build the user prompt for commit plan generation.

    Args:
        status: Output of `git status --porcelain`.
        diff: Unstaged diff text (possibly truncated).
        log: Recent one-line log, shown as a style reference.
        style: Optional style preset adding tone constraints.
        language: Optional target language for description text.
        detailed: Whether to ask for per-commit descriptions.

    Returns:
        The formatted user prompt.
    """
    return PLAN_PROMPT_TEMPLATE.format(
        schema=PLAN_SCHEMA_DETAILED if detailed else PLAN_SCHEMA_BASIC,
        extra_rules=_extra_rules(style, language, detailed),
        status=status,
        diff=diff,
        log=log,
    )
