"""Cache module for commitcraft.

This package keeps a short-lived plan cache so an unchanged diff doesn't
trigger another model call:
- exceptions: CacheIOError
- models: CachedPlan
- paths: Functions for getting cache file paths
- utils: hash_diff
- plan: Plan cache operations
"""

# Exceptions
from commitcraft.cache.exceptions import CacheIOError

# Models
from commitcraft.cache.models import CachedPlan

# Path utilities
from commitcraft.cache.paths import (
    get_applied_plan_file,
    get_cache_dir,
    get_plan_cache_file,
)

# General utilities
from commitcraft.cache.utils import hash_diff

# Plan cache operations
from commitcraft.cache.plan import (
    cache_applied_plan,
    cache_plan,
    clear_cache,
    load_applied_plan,
    load_cached_plan,
)


__all__ = [
    # Exceptions
    "CacheIOError",
    # Models
    "CachedPlan",
    # Paths
    "get_cache_dir",
    "get_plan_cache_file",
    "get_applied_plan_file",
    # Utils
    "hash_diff",
    # Plan cache
    "cache_plan",
    "load_cached_plan",
    "clear_cache",
    "cache_applied_plan",
    "load_applied_plan",
]
