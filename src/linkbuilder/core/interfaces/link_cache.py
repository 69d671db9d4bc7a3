"""Link cache interface."""

from datetime import timedelta
from typing import Protocol

from linkbuilder.core.entities.link import Link


class ILinkCache(Protocol):
    """Contract for link cache backends.

    Backends must be safe for concurrent use from many requests.
    Methods are async to support both in-memory and distributed
    cache implementations. Keys are case-sensitive opaque strings.
    """

    async def try_get(self, key: str) -> tuple[bool, list[Link]]:
        """Look up a cached link set.

        Args:
            key: The cache key to retrieve.

        Returns:
            ``(True, links)`` on a hit, ``(False, [])`` on a miss or
            when the entry has expired.
        """
        ...

    async def set(
        self,
        key: str,
        links: list[Link],
        ttl: timedelta | None = None,
    ) -> None:
        """Store a link set, replacing any previous value for the key.

        Args:
            key: The cache key.
            links: The links to store.
            ttl: Optional time-to-live. None means no automatic expiry;
                eviction is then up to the backend.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached link set.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        ...

    async def clear(self) -> None:
        """Clear all cached link sets."""
        ...
