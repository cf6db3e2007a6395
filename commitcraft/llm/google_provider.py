"""Google Gemini provider implementation.

Gemini authenticates with a static API key header and has no discrete
system role in a plain generateContent call, so the system and user
prompts are concatenated into a single text part.
"""

from google import genai
from google.genai import errors, types
from pydantic import BaseModel, ValidationError

from commitcraft.llm.base import BaseCompletionProvider, truncate_body
from commitcraft.llm.exceptions import EnvelopeParseError, TransportError


def normalize_model_name(model: str) -> str:
    """Strip an optional "models/" prefix from a Gemini model name."""
    model = model.strip()
    if model.startswith("models/"):
        return model[len("models/"):]
    return model


def _extract_text(response) -> str:
    """Read candidates[0].content.parts[0].text, or "" if any step is missing."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        return ""
    return getattr(parts[0], "text", None) or ""


def _raw_envelope(response) -> str:
    if isinstance(response, BaseModel):
        return response.model_dump_json(exclude_none=True)
    return repr(response)


class GoogleProvider(BaseCompletionProvider):
    """Google Gemini completion provider."""

    display_name = "Gemini"

    def _client(self) -> genai.Client:
        # HttpOptions.timeout is expressed in milliseconds
        return genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(self.request_timeout * 1000)),
        )

    def generate(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Generate text using Google Gemini.

        Args:
            model: Gemini model name, with or without the "models/" prefix.
            system_prompt: Instructions, prepended to the user prompt.
            user_prompt: The task content.

        Returns:
            The trimmed, non-empty response text.

        Raises:
            TransportError: If the request fails or returns an error status.
            EnvelopeParseError: If the response body can't be decoded.
            EmptyResponseError: If no text is found.
        """
        full_prompt = f"{system_prompt}\n\n{user_prompt}"
        client = self._client()

        try:
            response = client.models.generate_content(
                model=normalize_model_name(model),
                contents=[types.Content(parts=[types.Part(text=full_prompt)])],
            )
        except errors.APIError as e:
            body = truncate_body(str(e.details)) if e.details else e.message
            raise TransportError(
                f"Gemini API returned {e.code}: {body}",
                status_code=e.code,
                body=str(e.details),
            ) from e
        except ValidationError as e:
            raise EnvelopeParseError(f"Failed to parse Gemini response envelope: {e}") from e
        except Exception as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        return self._require_text(_extract_text(response), _raw_envelope(response))
