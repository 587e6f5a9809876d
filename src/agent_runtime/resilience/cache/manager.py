"""Bounded key/value cache with LRU eviction and lazy TTL expiry."""

import time
from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog

from .config import CacheConfig

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A cached value with its bookkeeping timestamps."""

    key: Hashable
    value: T
    inserted_at: float
    last_accessed_at: float

    def age(self, now: float) -> float:
        """Seconds since the entry was inserted."""
        return now - self.inserted_at


class CacheManager(Generic[T]):
    """In-memory cache bounded by entry count.

    Entries are kept in recency order: ``set`` and a successful ``get`` move a
    key to the most-recently-used end, and eviction always removes from the
    other end. Expired entries are only dropped when they are looked up, so
    there is no background timer.

    Example:
        cache: CacheManager[str] = CacheManager(CacheConfig(max_size=2, ttl=60))
        cache.set("search:python", "results...")
        cache.get("search:python")
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize cache.

        Args:
            config: Cache configuration (defaults to ``CacheConfig()``)
            clock: Monotonic time source in seconds
        """
        self.config = config or CacheConfig()
        self._clock = clock
        self._entries: OrderedDict[Hashable, CacheEntry[T]] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> T | None:
        """Return the live value for ``key`` or ``None``."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        now = self._clock()
        if entry.age(now) >= self.config.ttl:
            del self._entries[key]
            self._misses += 1
            logger.debug("Cache entry expired", key=key, ttl=self.config.ttl)
            return None

        self._entries.move_to_end(key)
        entry.last_accessed_at = now
        self._hits += 1
        return entry.value

    def set(self, key: Hashable, value: T) -> None:
        """Insert or replace ``key`` and mark it most recently used."""
        now = self._clock()
        if key in self._entries:
            del self._entries[key]
        else:
            while len(self._entries) >= self.config.max_size:
                self._evict_oldest()

        self._entries[key] = CacheEntry(
            key=key, value=value, inserted_at=now, last_accessed_at=now
        )

    def delete(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""
        if key in self._entries:
            del self._entries[key]
            return True
        return False

    def resize(self, max_size: int) -> None:
        """Change the capacity, evicting LRU entries that no longer fit."""
        self.config = self.config.model_copy(update={"max_size": max(1, max_size)})
        while len(self._entries) > self.config.max_size:
            self._evict_oldest()
        logger.info("Cache resized", max_size=self.config.max_size)

    def clear(self) -> None:
        """Drop all entries and reset hit/miss counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with ``size`` and ``hit_rate`` plus raw counters
        """
        accesses = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hit_rate": self._hits / accesses if accesses else 0.0,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "max_size": self.config.max_size,
        }

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry."""
        if self._entries:
            key, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Cache entry evicted", key=key)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[call-overload]
        return entry is not None and entry.age(self._clock()) < self.config.ttl
