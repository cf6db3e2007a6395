"""CLI commands for global configuration management."""

from typing import Optional

import typer

from commitcraft import global_config
from commitcraft.config import (
    API_KEY_ENV_VARS,
    DEFAULT_MODELS,
    LLMProvider,
    parse_provider,
    parse_style,
)
from commitcraft.exceptions import CommitcraftError
from commitcraft.cli.utils import fail

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitcraft configuration in ~/.commitcraft/",
    add_completion=False,
)

_PROVIDER_HELP = "Provider name (" + ", ".join(p.value for p in LLMProvider) + ")"


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def _provider_or_exit(provider: str) -> LLMProvider:
    try:
        return parse_provider(provider)
    except ValueError as e:
        fail(str(e))


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.load_global_config()
        if not config:
            typer.echo("No configuration found. Run 'commitcraft config set-provider' to set up.")
            return

        typer.echo("Current commitcraft configuration (~/.commitcraft/config.yaml):")
        typer.echo()
        typer.echo(f"  Provider: {config.get('provider', 'not set')}")
        typer.echo(f"  Model: {config.get('model', 'not set')}")

        for key, label in (("base_url", "Base URL"), ("style", "Style"), ("language", "Language")):
            if config.get(key):
                typer.echo(f"  {label}: {config[key]}")

        typer.echo()

        provider = global_config.get_active_provider(config)
        if provider:
            env_var = API_KEY_ENV_VARS[provider]
            api_key = global_config.get_credential(env_var)
            if api_key:
                typer.echo(f"  API Key ({env_var}): {_mask(api_key)}")
            else:
                typer.echo(f"  API Key ({env_var}): not set")

    except CommitcraftError as e:
        fail(f"reading configuration: {e}")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help=_PROVIDER_HELP),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _provider_or_exit(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except CommitcraftError as e:
        fail(str(e))

    typer.echo(f"API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=_PROVIDER_HELP),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (defaults to the provider's default model)",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Base URL override (required for the relay provider)",
    ),
) -> None:
    """Set the active provider and model."""
    llm_provider = _provider_or_exit(provider)

    if llm_provider == LLMProvider.RELAY and not base_url:
        fail("the relay provider needs --base-url")

    model = model or DEFAULT_MODELS[llm_provider]

    try:
        global_config.set_provider_and_model(llm_provider, model, base_url)
    except CommitcraftError as e:
        fail(str(e))

    typer.echo(f"Provider set to: {llm_provider.value}")
    typer.echo(f"Model set to: {model}")
    if base_url:
        typer.echo(f"Base URL set to: {base_url}")


@config_app.command("set-style")
def config_set_style(
    style: Optional[str] = typer.Argument(
        None,
        help="Style preset (conventional, conventional-emojis, detailed, concise); omit to clear",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        help="Language for commit descriptions",
    ),
) -> None:
    """Set the default style preset and description language."""
    try:
        preset = parse_style(style)
    except ValueError as e:
        fail(str(e))

    try:
        global_config.set_style_and_language(preset.value if preset else None, language)
    except CommitcraftError as e:
        fail(str(e))

    typer.echo(f"Style set to: {preset.value if preset else 'none'}")
    if language:
        typer.echo(f"Language set to: {language}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List all available providers with their default models."""
    typer.echo("Available providers:")
    typer.echo()
    for provider in LLMProvider:
        typer.echo(f"  - {provider.value} (default model: {DEFAULT_MODELS[provider]})")
