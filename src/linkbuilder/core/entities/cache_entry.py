"""Cache entry entity."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from linkbuilder.core.entities.link import Link


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a computed link set together with its creation time and
    optional TTL. Owned by a cache backend and never handed out;
    backends return copies of ``value`` and derive the expiry deadline
    from ``ttl`` on their own clock.
    """

    key: str
    value: tuple[Link, ...]
    created_at: datetime
    ttl: timedelta | None = None

    @classmethod
    def create(
        cls,
        key: str,
        links: Iterable[Link],
        ttl: timedelta | None = None,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            links: The links to store.
            ttl: Optional time-to-live. None means no automatic expiry.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=tuple(links),
            created_at=datetime.now(timezone.utc),
            ttl=ttl,
        )
