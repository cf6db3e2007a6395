"""LLM-related exception classes.

Contains all exception classes for completion provider operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no credential can be resolved
- TransportError: Network failure or non-success HTTP status
- EnvelopeParseError: Success status but the body doesn't match the provider schema
- EmptyResponseError: Schema matched but the extracted text was blank
- JSONParseError: No JSON plan could be located/decoded in the model text
"""

from commitcraft.exceptions import CommitcraftError


class LLMError(CommitcraftError):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class TransportError(LLMError):
    """Raised when a provider cannot be reached or answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EnvelopeParseError(LLMError):
    """Raised when a success response doesn't match the expected envelope."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the provider returned no usable text."""

    pass


class JSONParseError(LLMError):
    """Raised when the LLM response cannot be parsed as a commit plan.

    The raw provider text is kept on the exception for debugging.
    """

    def __init__(self, message: str, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = raw_response
