"""Cache utility functions for commitcraft."""

import hashlib


def hash_diff(diff: str) -> str:
    """Compute the fingerprint of a diff used as the cache key.

    Args:
        diff: The diff text.

    Returns:
        MD5 hex digest of the diff.
    """
    return hashlib.md5(diff.encode(), usedforsecurity=False).hexdigest()
