"""Bounded caching and memoization.

``CacheManager`` keeps a fixed number of entries with LRU eviction and TTL
expiry; ``Memoizer`` wraps deterministic functions with an unbounded cache.
"""

from .config import CacheConfig
from .manager import CacheEntry, CacheManager
from .memoizer import Memoizer, default_key

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheManager",
    "Memoizer",
    "default_key",
]
