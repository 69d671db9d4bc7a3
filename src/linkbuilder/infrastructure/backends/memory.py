"""In-memory link cache implementation."""

import fnmatch
import math
import threading
import time
from collections.abc import Callable
from datetime import timedelta

from cachetools import TLRUCache  # type: ignore[import-untyped]

from linkbuilder.core.entities.cache_entry import CacheEntry
from linkbuilder.core.entities.link import Link


def _time_to_use(key: str, entry: CacheEntry, now: float) -> float:
    if entry.ttl is None:
        return math.inf
    return now + entry.ttl.total_seconds()


class InMemoryLinkCache:
    """In-memory link cache using LRU with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools'
    TLRUCache, so entries without a TTL stay until evicted by the
    size bound. Access is serialized with a lock, so the cache can be
    shared by the event loop and worker threads.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory link cache.

        Args:
            maxsize: Maximum number of link sets in the cache.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )
        self._lock = threading.RLock()

    async def try_get(self, key: str) -> tuple[bool, list[Link]]:
        """Look up a cached link set.

        Args:
            key: The cache key to retrieve.

        Returns:
            ``(True, links)`` on a hit, ``(False, [])`` otherwise.
        """
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            return False, []
        return True, list(entry.value)

    async def set(
        self,
        key: str,
        links: list[Link],
        ttl: timedelta | None = None,
    ) -> None:
        """Store a link set, replacing any previous value.

        Args:
            key: The cache key.
            links: The links to store.
            ttl: Optional time-to-live. None means no automatic expiry.
        """
        entry = CacheEntry.create(key=key, links=links, ttl=ttl)
        with self._lock:
            self._cache[key] = entry

    async def delete(self, key: str) -> bool:
        """Delete a cached link set.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with self._lock:
            try:
                del self._cache[key]
                return True
            except KeyError:
                return False

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys (case-sensitive).

        Returns:
            Number of keys deleted.
        """
        with self._lock:
            keys_to_delete = [
                key for key in list(self._cache.keys())
                if fnmatch.fnmatchcase(key, pattern)
            ]

            count = 0
            for key in keys_to_delete:
                try:
                    del self._cache[key]
                    count += 1
                except KeyError:
                    pass

        return count

    async def clear(self) -> None:
        """Clear all cached link sets."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        """Return the number of entries in the cache."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
