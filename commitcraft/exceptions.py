"""Root exception class for commitcraft.

Every subsystem (llm, git, plan, cache, global_config) derives its
exceptions from CommitcraftError so the CLI can report them uniformly.
"""


class CommitcraftError(Exception):
    """Base exception for all commitcraft errors."""

    pass
