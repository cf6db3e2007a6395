"""Cache-related exception classes."""

from commitcraft.exceptions import CommitcraftError


class CacheIOError(CommitcraftError):
    """Raised when a cache file can't be read, decoded or written."""

    pass
