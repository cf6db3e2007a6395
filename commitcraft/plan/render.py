"""Commit plan formatting and rendering.

Contains:
- format_description_body: Render a CommitDescription as a message body
- render_commit_message: Join a message with its description body
- print_plan_human: Readable per-commit plan display
"""

import typer

from commitcraft.plan.models import CommitDescription, CommitPlan


def format_description_body(description: CommitDescription) -> str:
    """Render a CommitDescription as a commit message body.

    Args:
        description: The structured rationale.

    Returns:
        The body text ("" if the description carries nothing).

    Example output:
        Add retry handling to the upload client.

        Changes:
        - Wrap requests in a retry loop
        - Add backoff configuration

        Impact: MEDIUM - Uploads survive transient failures
        Affected areas: client, config

        BREAKING CHANGES:
        - Upload() now raises on final failure
    """
    sections = []

    if description.summary.strip():
        sections.append(description.summary.strip())

    changes = [c.strip() for c in description.changes if c.strip()]
    if changes:
        sections.append("Changes:\n" + "\n".join(f"- {c}" for c in changes))

    impact = description.impact
    if impact is not None:
        headline = f"Impact: {impact.level.upper()}"
        if impact.explanation.strip():
            headline += f" - {impact.explanation.strip()}"
        lines = [headline]
        areas = [a.strip() for a in impact.affected_areas if a.strip()]
        if areas:
            lines.append(f"Affected areas: {', '.join(areas)}")
        sections.append("\n".join(lines))

    breaking = [b.strip() for b in description.breaking_changes if b.strip()]
    if breaking:
        sections.append("BREAKING CHANGES:\n" + "\n".join(f"- {b}" for b in breaking))

    return "\n\n".join(sections)


def render_commit_message(message: str, description: CommitDescription | None) -> str:
    """Join a (sanitized) message with its description body.

    Args:
        message: The commit message.
        description: Optional structured rationale.

    Returns:
        message, followed by one blank line and the body when there is one.
    """
    if description is None:
        return message
    body = format_description_body(description)
    if not body:
        return message
    return f"{message}\n\n{body}"


def print_plan_human(plan: CommitPlan) -> None:
    """Print a plan in a readable, per-commit layout."""
    for i, commit in enumerate(plan.commits, start=1):
        typer.echo("")
        typer.echo(f"Commit #{i} - {len(commit.files)} file(s)")
        typer.echo(f"  Message: {commit.message}")
        if commit.hash:
            typer.echo(f"  Hash: {commit.hash}")

        typer.echo("  Files:")
        for f in commit.files:
            typer.echo(f"    -> {f}")

        if commit.commands:
            typer.echo("  Commands:")
            for cmd in commit.commands:
                typer.echo(f"    $ {cmd}")

        if commit.description is not None:
            body = format_description_body(commit.description)
            if body:
                typer.echo("  Description:")
                for line in body.splitlines():
                    typer.echo(f"    {line}" if line else "")
