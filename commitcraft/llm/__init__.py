"""Completion provider module for commitcraft.

This module provides a unified interface to the supported completion
backends. The backend is chosen by the configured provider name.
"""

from dotenv import load_dotenv

from commitcraft.config import LLMProvider
from commitcraft.llm.base import BaseCompletionProvider, resolve_api_key
from commitcraft.llm.exceptions import (
    EmptyResponseError,
    EnvelopeParseError,
    JSONParseError,
    LLMError,
    MissingAPIKeyError,
    TransportError,
)
from commitcraft.llm.parsing import extract_json

# Load environment variables from .env file
load_dotenv()

# Backends that speak the OpenAI chat/completions wire format
OPENAI_COMPATIBLE = (
    LLMProvider.OPENAI,
    LLMProvider.REST,
    LLMProvider.DEEPSEEK,
    LLMProvider.ZAI,
    LLMProvider.OPENROUTER,
    LLMProvider.GROQ,
)


def get_provider(
    provider: LLMProvider,
    base_url: str | None = None,
    request_timeout: float | None = None,
) -> BaseCompletionProvider:
    """Get a completion provider instance.

    Args:
        provider: The configured backend.
        base_url: Base URL override (chat and relay backends only).
        request_timeout: Transport timeout in seconds.

    Returns:
        An instance of the appropriate provider.

    Raises:
        MissingAPIKeyError: If no credential is available for the backend.
        ValueError: If the provider is not supported.
    """
    api_key = resolve_api_key(provider)

    if provider == LLMProvider.GEMINI:
        from commitcraft.llm.google_provider import GoogleProvider

        return GoogleProvider(api_key, request_timeout=request_timeout)

    elif provider in OPENAI_COMPATIBLE:
        from commitcraft.llm.openai_provider import OpenAICompatibleProvider

        return OpenAICompatibleProvider(
            api_key,
            backend=provider,
            base_url=base_url,
            request_timeout=request_timeout,
        )

    elif provider == LLMProvider.RELAY:
        from commitcraft.llm.relay_provider import RelayProvider

        return RelayProvider(api_key, base_url=base_url, request_timeout=request_timeout)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseCompletionProvider",
    "LLMError",
    "MissingAPIKeyError",
    "TransportError",
    "EnvelopeParseError",
    "EmptyResponseError",
    "JSONParseError",
    "extract_json",
    "get_provider",
    "resolve_api_key",
]
