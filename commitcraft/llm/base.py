"""Base classes and shared utilities for completion providers."""

import os
from abc import ABC, abstractmethod
from typing import Optional

from commitcraft.config import API_KEY_ENV_VARS, DEFAULT_REQUEST_TIMEOUT, LLMProvider
from commitcraft.llm.exceptions import EmptyResponseError, MissingAPIKeyError

# Longest slice of a raw response body quoted in error messages
MAX_ERROR_BODY_CHARS = 2000


def resolve_api_key(provider: LLMProvider) -> str:
    """Resolve the credential for a provider.

    Checks in order:
    1. Environment variable (e.g. GEMINI_API_KEY)
    2. ~/.commitcraft/credentials file

    Args:
        provider: The provider whose credential is needed.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If the API key is not found.
    """
    env_var_name = API_KEY_ENV_VARS[provider]

    api_key = os.getenv(env_var_name)
    if api_key and api_key.strip():
        return api_key.strip()

    from commitcraft.global_config import get_credential

    api_key = get_credential(env_var_name)
    if api_key:
        return api_key

    raise MissingAPIKeyError(
        f"{provider.value} API key not found. Set it using:\n"
        f"  1. Environment variable: export {env_var_name}=your_key_here\n"
        f"  2. Run: commitcraft config set-key {provider.value}\n"
        f"  3. Manually add to ~/.commitcraft/credentials"
    )


def truncate_body(body: str) -> str:
    """Shorten a response body for inclusion in an error message."""
    if len(body) <= MAX_ERROR_BODY_CHARS:
        return body
    return body[:MAX_ERROR_BODY_CHARS] + "...[truncated]"


class BaseCompletionProvider(ABC):
    """Abstract base class for completion providers.

    A provider sends one system/user prompt pair to a backend and returns
    the model's free-form text. It never retries and never parses the text.
    """

    #: Human-readable backend name used in error messages
    display_name = "Provider"

    def __init__(self, api_key: str, request_timeout: Optional[float] = None):
        self.api_key = api_key
        self.request_timeout = request_timeout or DEFAULT_REQUEST_TIMEOUT

    @abstractmethod
    def generate(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Send a prompt pair and return the model's text.

        Args:
            model: Backend model identifier.
            system_prompt: Instructions for the model.
            user_prompt: The task content.

        Returns:
            The trimmed, non-empty response text.

        Raises:
            TransportError: On network failure or non-success status.
            EnvelopeParseError: If the success body has an unexpected shape.
            EmptyResponseError: If the response text is blank.
        """
        pass

    def _require_text(self, text: Optional[str], raw: str = "") -> str:
        """Trim the extracted text and fail if nothing is left.

        Args:
            text: Text extracted from the response envelope (may be None).
            raw: Raw envelope, quoted in the error for debugging.

        Returns:
            The trimmed text.

        Raises:
            EmptyResponseError: If the text is missing or blank.
        """
        trimmed = (text or "").strip()
        if not trimmed:
            message = f"{self.display_name} returned empty text."
            if raw:
                message += f" Raw: {truncate_body(raw)}"
            raise EmptyResponseError(message)
        return trimmed
