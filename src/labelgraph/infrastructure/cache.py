"""
Generic LRU cache implementation with TTL support.

Graphs use this cache to remember path query results between mutations.
Entries are evicted least-recently-used first once ``max_size`` is reached, and
expire ``ttl`` seconds after they were stored.
"""

from collections import OrderedDict
from threading import Lock
from time import monotonic
from typing import Dict, Generic, Hashable, Optional, Tuple, TypeVar

T = TypeVar("T")


class LRUCache(Generic[T]):
    """
    Thread-safe LRU cache with TTL support.

    Attributes:
        max_size: Maximum number of entries to store (0 disables caching)
        ttl: Time-to-live in seconds
    """

    def __init__(self, max_size: int, ttl: float):
        if max_size < 0:
            raise ValueError("max_size must be non-negative")
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._entries: OrderedDict[Hashable, Tuple[T, float]] = OrderedDict()
        self._lock = Lock()
        self.max_size = max_size
        self.ttl = ttl

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Optional[T]:
        """
        Get value from cache.

        Returns:
            Cached value if found and not expired, None otherwise
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                value, expires_at = entry
                if monotonic() < expires_at:
                    self._hits += 1
                    self._entries.move_to_end(key)
                    return value
                del self._entries[key]
            self._misses += 1
            return None

    def put(self, key: Hashable, value: T) -> None:
        """Store value in cache, evicting the least recently used entries if full."""
        if self.max_size == 0:
            return
        with self._lock:
            self._entries[key] = (value, monotonic() + self.ttl)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
                self._evictions += 1

    def remove(self, key: Hashable) -> None:
        """Remove an item from the cache."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Clear all entries from cache. Metrics are kept."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_metrics(self) -> Dict[str, float]:
        """
        Get cache performance metrics.

        Returns:
            Dictionary containing hits, misses, evictions, size and hit_rate
        """
        with self._lock:
            total = self._hits + self._misses
            return {
                "hits": float(self._hits),
                "misses": float(self._misses),
                "evictions": float(self._evictions),
                "size": float(len(self._entries)),
                "hit_rate": float(self._hits) / total if total else 0.0,
            }
