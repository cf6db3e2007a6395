"""Commit message sanitizing and validation.

Sanitizing repairs cosmetic problems a model tends to introduce (wrapping
quotes, doubled spaces, trailing periods). Validation only ever warns,
except for an empty message, which is the one thing sanitizing can't fix.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

import typer

from commitcraft.config import CONVENTIONAL_PRESETS, StylePreset

DEFAULT_MAX_SUBJECT_LENGTH = 72

CONVENTIONAL_PREFIXES = (
    "feat:", "fix:", "docs:", "style:", "refactor:",
    "perf:", "test:", "build:", "ci:", "chore:",
    "revert:", "wip:", "merge:",
)

# Gitmoji shortcode such as ":sparkles:"
_EMOJI_SHORTCODE_RE = re.compile(r"^:[a-z0-9_+\-]+:\s*")


@dataclass
class ValidationResult:
    """Outcome of validating a commit message."""

    is_valid: bool = True
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def _strip_leading_emoji(subject: str) -> str:
    match = _EMOJI_SHORTCODE_RE.match(subject)
    if match:
        return subject[match.end():]
    if subject and not subject[0].isascii() and not subject[0].isalnum():
        _emoji, _sep, rest = subject.partition(" ")
        return rest.lstrip()
    return subject


class CommitMessageValidator:
    """Validates and sanitizes commit messages for an optional style preset."""

    def __init__(
        self,
        preset: Optional[StylePreset] = None,
        max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH,
    ):
        self.preset = preset
        self.max_subject_length = max_subject_length

    def auto_sanitize(self, message: str) -> str:
        """Return a cleaned-up copy of message.

        Only the subject line is rewritten. A body is kept verbatim (trimmed)
        and separated from the subject by exactly one blank line.

        Args:
            message: The raw commit message.

        Returns:
            The sanitized message; "" if the input was blank.
        """
        message = message.strip()
        if not message:
            return message

        lines = message.splitlines()
        subject = self._sanitize_subject(lines[0])
        if len(lines) == 1:
            return subject

        body_start = 2 if not lines[1].strip() else 1
        body = "\n".join(lines[body_start:]).strip()
        if not body:
            return subject
        return f"{subject}\n\n{body}"

    def _sanitize_subject(self, subject: str) -> str:
        subject = subject.strip()

        if len(subject) > 1 and subject.startswith('"') and subject.endswith('"'):
            subject = subject[1:-1].strip()

        while "  " in subject:
            subject = subject.replace("  ", " ")

        if subject.endswith("."):
            subject = subject[:-1]

        # "feat: ..." style prefixes stay lowercase
        if subject and subject[0].islower() and ":" not in subject:
            subject = subject[0].upper() + subject[1:]

        return subject

    def has_conventional_prefix(self, subject: str) -> bool:
        """Check whether subject starts with a conventional commit type."""
        lowered = subject.lower()
        if self.preset == StylePreset.CONVENTIONAL_EMOJIS:
            lowered = _strip_leading_emoji(lowered)
        return lowered.startswith(CONVENTIONAL_PREFIXES)

    def validate(self, message: str) -> ValidationResult:
        """Check a message against the style rules.

        Args:
            message: The commit message (usually already sanitized).

        Returns:
            A ValidationResult. Only an empty message makes it invalid.
        """
        result = ValidationResult()

        lines = message.splitlines()
        if not lines:
            result.is_valid = False
            result.errors.append("Commit message is empty")
            return result

        subject = lines[0]

        if len(subject) > self.max_subject_length:
            result.warnings.append(
                f"Subject is {len(subject)} characters (recommended: <= {self.max_subject_length})"
            )
            result.suggestions.append(
                f"Consider shortening to: {subject[:self.max_subject_length]}..."
            )

        if self.preset in CONVENTIONAL_PRESETS and not self.has_conventional_prefix(subject):
            result.warnings.append("Missing conventional commit prefix")
            result.suggestions.append(
                "Use: feat:, fix:, docs:, chore:, refactor:, test:, build:, ci:"
            )

        if len(subject) > 1 and subject.startswith('"') and subject.endswith('"'):
            result.warnings.append("Subject is wrapped in quotes")
            result.suggestions.append("Remove surrounding quotes from the subject line")

        if subject.endswith("."):
            result.warnings.append("Subject ends with period")
            result.suggestions.append("Remove trailing period from subject line")

        if "  " in subject:
            result.warnings.append("Subject contains multiple consecutive spaces")

        result.is_valid = not result.errors
        return result

    def print_validation(self, message: str, result: ValidationResult) -> None:
        """Print warnings, suggestions and errors to stderr."""
        if result.warnings:
            typer.echo("", err=True)
            typer.echo(f"Warning for commit: {message}", err=True)
            for warning in result.warnings:
                typer.echo(f"   - {warning}", err=True)

            if result.suggestions:
                typer.echo("", err=True)
                typer.echo("   Suggestions:", err=True)
                for suggestion in result.suggestions:
                    typer.echo(f"   -> {suggestion}", err=True)

        if result.errors:
            typer.echo("", err=True)
            typer.echo(f"Error for commit: {message}", err=True)
            for error in result.errors:
                typer.echo(f"   - {error}", err=True)
