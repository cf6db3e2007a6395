"""OpenAI-compatible chat provider implementation.

Serves every backend that speaks the chat/completions wire format
(OpenAI itself, DeepSeek, Z.ai, OpenRouter, Groq, or any self-hosted
"rest" endpoint). Only the base URL and the API key differ.
"""

from typing import Optional

from openai import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    OpenAI,
)

from commitcraft.config import DEFAULT_BASE_URLS, DEFAULT_TEMPERATURE, LLMProvider
from commitcraft.llm.base import BaseCompletionProvider, truncate_body
from commitcraft.llm.exceptions import EnvelopeParseError, TransportError

_DISPLAY_NAMES = {
    LLMProvider.OPENAI: "OpenAI",
    LLMProvider.REST: "REST provider",
    LLMProvider.DEEPSEEK: "DeepSeek",
    LLMProvider.ZAI: "Z.ai",
    LLMProvider.OPENROUTER: "OpenRouter",
    LLMProvider.GROQ: "Groq",
}

# OpenRouter asks clients to identify themselves
_EXTRA_HEADERS = {
    LLMProvider.OPENROUTER: {
        "HTTP-Referer": "https://github.com/commitcraft",
        "X-Title": "commitcraft",
    },
}


class OpenAICompatibleProvider(BaseCompletionProvider):
    """Bearer-authenticated chat/completions provider."""

    def __init__(
        self,
        api_key: str,
        backend: LLMProvider = LLMProvider.OPENAI,
        base_url: Optional[str] = None,
        request_timeout: Optional[float] = None,
    ):
        """Initialize the provider.

        Args:
            api_key: Bearer token for the backend.
            backend: Which named backend this instance talks to.
            base_url: Overrides the backend's default base URL.
            request_timeout: Transport timeout in seconds.
        """
        super().__init__(api_key, request_timeout)
        self.backend = backend
        self.base_url = base_url or DEFAULT_BASE_URLS.get(backend)
        self.display_name = _DISPLAY_NAMES.get(backend, "Provider")

    def _client(self) -> OpenAI:
        # No retries at this layer: a failure is terminal for the invocation
        return OpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            max_retries=0,
            timeout=self.request_timeout,
        )

    def generate(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Generate text using a chat/completions endpoint.

        Args:
            model: Backend model identifier.
            system_prompt: Sent as the "system" message.
            user_prompt: Sent as the "user" message.

        Returns:
            The trimmed, non-empty response text.

        Raises:
            TransportError: If the request fails or returns an error status.
            EnvelopeParseError: If the response body has an unexpected shape.
            EmptyResponseError: If no text is found.
        """
        client = self._client()

        try:
            response = client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=DEFAULT_TEMPERATURE,
                stream=False,
                extra_headers=_EXTRA_HEADERS.get(self.backend),
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else str(e)
            raise TransportError(
                f"{self.display_name} API returned {e.status_code}: {truncate_body(body)}",
                status_code=e.status_code,
                body=body,
            ) from e
        except APIResponseValidationError as e:
            raise EnvelopeParseError(f"Failed to parse {self.display_name} response: {e}") from e
        except APIConnectionError as e:
            raise TransportError(f"{self.display_name} request failed: {e}") from e

        choices = getattr(response, "choices", None)
        if choices is None:
            raise EnvelopeParseError(
                f"Failed to parse {self.display_name} response: missing 'choices' in {response!r}"
            )

        content = None
        if choices:
            try:
                content = choices[0].message.content
            except AttributeError as e:
                raise EnvelopeParseError(
                    f"Failed to parse {self.display_name} response: {e}"
                ) from e

        return self._require_text(content, repr(response))
