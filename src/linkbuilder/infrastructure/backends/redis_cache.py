"""Redis link cache implementation."""

from datetime import timedelta

import redis.asyncio as redis

from linkbuilder.core.entities.link import Link
from linkbuilder.core.interfaces.serializer import ISerializer
from linkbuilder.infrastructure.serializers.json import JsonLinkSerializer


class RedisLinkCache:
    """Redis link cache for distributed deployments.

    Supports TTL, pattern deletion, and is suitable for
    multi-process and distributed deployments.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "linkbuilder",
        default_ttl: int | None = None,
        serializer: ISerializer | None = None,
    ) -> None:
        """Initialize the Redis link cache.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys.
            default_ttl: Default TTL in seconds. None stores entries
                without expiry.
            serializer: Codec for link sets. Defaults to JSON.
        """
        self._redis: redis.Redis = redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl
        self._serializer = serializer or JsonLinkSerializer()

    async def try_get(self, key: str) -> tuple[bool, list[Link]]:
        """Look up a cached link set.

        Args:
            key: The cache key to retrieve.

        Returns:
            ``(True, links)`` on a hit, ``(False, [])`` otherwise.
        """
        data = await self._redis.get(self._prefixed_key(key))
        if data is None:
            return False, []
        return True, self._serializer.deserialize(data)

    async def set(
        self,
        key: str,
        links: list[Link],
        ttl: timedelta | None = None,
    ) -> None:
        """Store a link set with optional TTL.

        Args:
            key: The cache key.
            links: The links to store.
            ttl: Optional time-to-live. If None, uses default.
        """
        prefixed_key = self._prefixed_key(key)
        value = self._serializer.serialize(links)

        if ttl is not None:
            await self._redis.setex(prefixed_key, max(1, int(ttl.total_seconds())), value)
        elif self._default_ttl is not None:
            await self._redis.setex(prefixed_key, self._default_ttl, value)
        else:
            await self._redis.set(prefixed_key, value)

    async def delete(self, key: str) -> bool:
        """Delete a cached link set.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        result = await self._redis.delete(self._prefixed_key(key))
        return result > 0

    async def clear(self) -> None:
        """Clear all cached link sets with our prefix.

        Note: This only clears keys with our prefix, not the entire Redis DB.
        """
        await self._delete_by_pattern(f"{self._key_prefix}:*")

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys, without prefix.

        Returns:
            Number of keys deleted.
        """
        return await self._delete_by_pattern(self._prefixed_key(pattern))

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                count += await self._redis.delete(*keys)

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: str) -> str:
        # Link keys can start with an empty route group, so always prefix
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisLinkCache":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
