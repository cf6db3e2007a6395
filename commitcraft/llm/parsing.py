"""Utilities for pulling JSON out of free-form model output.

Models are told to answer with bare JSON, but they frequently wrap it in a
markdown fence or surround it with prose. extract_json() isolates the most
plausible JSON span without validating it.
"""

from typing import Optional

FENCE = "```"


def _strip_fence(text: str) -> Optional[str]:
    # Drop the opening fence line (```json or ```); a fence without a
    # newline has no content at all.
    newline = text.find("\n")
    if newline == -1:
        return None
    text = text[newline + 1:]

    closing = text.rfind(FENCE)
    if closing != -1:
        text = text[:closing]
    return text.strip()


def _first_of(text: str, *chars: str) -> int:
    positions = [p for p in (text.find(c) for c in chars) if p != -1]
    return min(positions) if positions else -1


def _last_of(text: str, *chars: str) -> int:
    return max(text.rfind(c) for c in chars)


def extract_json(text: str) -> Optional[str]:
    """Extract the JSON candidate substring from a model response.

    Args:
        text: Raw model text.

    Returns:
        The substring from the first '{' or '[' through the last '}' or ']'
        (inclusive, trimmed), or None when no such span exists.
    """
    candidate = text.strip()

    if candidate.startswith(FENCE):
        candidate = _strip_fence(candidate)
        if candidate is None:
            return None

    start = _first_of(candidate, "{", "[")
    end = _last_of(candidate, "}", "]")

    if start == -1 or end == -1 or end <= start:
        return None

    return candidate[start:end + 1].strip()
