"""Shared utility functions for CLI commands."""

from typing import NoReturn, Optional

import typer

from commitcraft.config import (
    DEFAULT_MODELS,
    Settings,
    load_settings,
    parse_provider,
    parse_style,
)
from commitcraft.exceptions import CommitcraftError
from commitcraft.git.repository import GitRepository


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def open_repository() -> GitRepository:
    """Locate the repository of the current directory or exit."""
    try:
        return GitRepository.discover()
    except CommitcraftError as e:
        fail(str(e))


def build_settings(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    style: Optional[str] = None,
    language: Optional[str] = None,
    max_diff_chars: Optional[int] = None,
) -> Settings:
    """Load settings from ~/.commitcraft/config.yaml and apply CLI overrides.

    Switching provider on the command line resets the model to that
    provider's default (unless --model is also given) and drops the
    configured base URL, which belongs to the configured provider.
    """
    try:
        settings = load_settings()
    except CommitcraftError as e:
        fail(str(e))

    try:
        if provider:
            chosen = parse_provider(provider)
            if chosen != settings.provider:
                settings.provider = chosen
                settings.model = DEFAULT_MODELS[chosen]
                settings.base_url = None
        if style:
            settings.style = parse_style(style)
    except ValueError as e:
        fail(str(e))

    if model:
        settings.model = model
    if language:
        settings.language = language
    if max_diff_chars is not None:
        settings.max_diff_chars = max_diff_chars

    return settings
