"""Relay server provider implementation.

The relay is a private passthrough endpoint that forwards the prompt pair
to an upstream model on the caller's behalf. Responses may come back
wrapped in a {"data": {...}} envelope or bare.
"""

import json
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from commitcraft.config import RELAY_API_PREFIX
from commitcraft.llm.base import BaseCompletionProvider, truncate_body
from commitcraft.llm.exceptions import EnvelopeParseError, LLMError, TransportError


class RelayChatRequest(BaseModel):
    """Request body accepted by the relay chat endpoint."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model: str
    system_prompt: str = Field(alias="systemPrompt")
    user_prompt: str = Field(alias="userPrompt")


class RelayChatResponse(BaseModel):
    """Inner response shape returned by the relay."""

    text: str


def unwrap_envelope(payload):
    """Return payload["data"] when the top-level object carries it."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


class RelayProvider(BaseCompletionProvider):
    """Bearer-authenticated relay provider."""

    display_name = "Relay server"

    def __init__(self, api_key: str, base_url: Optional[str], request_timeout: Optional[float] = None):
        """Initialize the relay provider.

        Args:
            api_key: Relay access token.
            base_url: Relay server root URL.
            request_timeout: Transport timeout in seconds.

        Raises:
            LLMError: If no base URL is configured.
        """
        super().__init__(api_key, request_timeout)
        if not base_url:
            raise LLMError(
                "Relay base URL is not configured. Set it with:\n"
                "  commitcraft config set-provider relay --base-url https://your-relay"
            )
        self.base_url = base_url

    def _endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/{RELAY_API_PREFIX}/ai/chat"

    def generate(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Generate text through the relay server.

        Args:
            model: Upstream model identifier.
            system_prompt: Forwarded as systemPrompt.
            user_prompt: Forwarded as userPrompt.

        Returns:
            The trimmed, non-empty response text.

        Raises:
            TransportError: If the request fails or returns an error status.
            EnvelopeParseError: If the response body has an unexpected shape.
            EmptyResponseError: If no text is found.
        """
        body = RelayChatRequest(model=model, system_prompt=system_prompt, user_prompt=user_prompt)

        try:
            resp = requests.post(
                self._endpoint(),
                json=body.model_dump(by_alias=True),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.request_timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Relay server request failed: {e}") from e

        text = resp.text
        if not resp.ok:
            raise TransportError(
                f"Relay server returned {resp.status_code}: {truncate_body(text)}",
                status_code=resp.status_code,
                body=text,
            )

        try:
            payload = unwrap_envelope(json.loads(text))
            parsed = RelayChatResponse.model_validate(payload)
        except (json.JSONDecodeError, ValidationError) as e:
            raise EnvelopeParseError(
                f"Failed to parse relay server response: {e}\nRaw: {truncate_body(text)}"
            ) from e

        return self._require_text(parsed.text, text)
