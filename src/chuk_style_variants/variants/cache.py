"""
Bounded result cache with first-in-first-out eviction.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

logger = logging.getLogger(__name__)


class FIFOCache:
    """
    Memoizes resolved results up to a fixed capacity.

    Once full, the oldest inserted entry is evicted before a new one is
    stored. Lookups do not refresh an entry's position. A capacity of 0
    stores nothing.
    """

    def __init__(self, capacity: int):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries
        """
        self.capacity = capacity
        self._entries: dict[Hashable, Any] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Get a cached value, None if absent."""
        return self._entries.get(key)

    def put(self, key: Hashable, value: Any) -> None:
        """
        Store a value, evicting the oldest entries if at capacity.

        Args:
            key: Cache key
            value: Value to memoize
        """
        if self.capacity <= 0:
            return

        if key not in self._entries:
            while len(self._entries) >= self.capacity:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Evicted cache entry %r", oldest)

        self._entries[key] = value

    def keys(self) -> list[Hashable]:
        """Cached keys, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
