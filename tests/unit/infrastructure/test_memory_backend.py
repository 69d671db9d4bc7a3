"""Tests for InMemoryLinkCache."""

from datetime import timedelta

import pytest

from linkbuilder.core.entities.link import Link
from linkbuilder.infrastructure.backends.memory import InMemoryLinkCache

LINKS = [Link("/orders/1", "self", "GET"), Link("/orders/1", "cancel", "POST")]


class FakeTimer:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryLinkCache:
    """Tests for InMemoryLinkCache."""

    @pytest.fixture
    def timer(self) -> FakeTimer:
        return FakeTimer()

    @pytest.fixture
    def cache(self, timer: FakeTimer) -> InMemoryLinkCache:
        """Create a cache for testing."""
        return InMemoryLinkCache(maxsize=100, timer=timer)

    @pytest.mark.asyncio
    async def test_set_and_try_get(self, cache: InMemoryLinkCache) -> None:
        await cache.set("key1", LINKS)

        found, links = await cache.try_get("key1")

        assert found is True
        assert links == LINKS

    @pytest.mark.asyncio
    async def test_try_get_missing_key(self, cache: InMemoryLinkCache) -> None:
        assert await cache.try_get("nonexistent") == (False, [])

    @pytest.mark.asyncio
    async def test_keys_are_case_sensitive(self, cache: InMemoryLinkCache) -> None:
        await cache.set("Key", LINKS)

        found, _ = await cache.try_get("key")

        assert found is False

    @pytest.mark.asyncio
    async def test_set_replaces_value(self, cache: InMemoryLinkCache) -> None:
        await cache.set("key1", LINKS)
        await cache.set("key1", [Link("/orders/2", "self")])

        _, links = await cache.try_get("key1")

        assert links == [Link("/orders/2", "self")]

    @pytest.mark.asyncio
    async def test_stored_value_is_isolated(self, cache: InMemoryLinkCache) -> None:
        """Test that callers cannot mutate a stored entry."""
        original = list(LINKS)
        await cache.set("key1", original)
        original.append(Link("/extra", "extra"))

        _, links = await cache.try_get("key1")
        links.clear()

        _, again = await cache.try_get("key1")
        assert again == LINKS

    @pytest.mark.asyncio
    async def test_ttl_expiry(self, cache: InMemoryLinkCache, timer: FakeTimer) -> None:
        await cache.set("key1", LINKS, ttl=timedelta(seconds=10))

        timer.now = 9.0
        assert (await cache.try_get("key1"))[0] is True

        timer.now = 10.5
        assert await cache.try_get("key1") == (False, [])

    @pytest.mark.asyncio
    async def test_no_ttl_never_expires(
        self, cache: InMemoryLinkCache, timer: FakeTimer
    ) -> None:
        await cache.set("key1", LINKS)

        timer.now = 10_000_000.0

        assert (await cache.try_get("key1"))[0] is True

    @pytest.mark.asyncio
    async def test_lru_eviction(self, timer: FakeTimer) -> None:
        """Test LRU eviction when maxsize is reached."""
        cache = InMemoryLinkCache(maxsize=3, timer=timer)

        await cache.set("key1", LINKS)
        await cache.set("key2", LINKS)
        await cache.set("key3", LINKS)

        # Access key1 to make it recently used
        await cache.try_get("key1")

        # Add key4, should evict key2 (least recently used)
        await cache.set("key4", LINKS)

        assert (await cache.try_get("key1"))[0] is True
        assert (await cache.try_get("key2"))[0] is False
        assert (await cache.try_get("key3"))[0] is True
        assert (await cache.try_get("key4"))[0] is True

    @pytest.mark.asyncio
    async def test_delete(self, cache: InMemoryLinkCache) -> None:
        await cache.set("key1", LINKS)

        assert await cache.delete("key1") is True
        assert (await cache.try_get("key1"))[0] is False
        assert await cache.delete("key1") is False

    @pytest.mark.asyncio
    async def test_delete_pattern(self, cache: InMemoryLinkCache) -> None:
        await cache.set("orders:get_order:Order:1", LINKS)
        await cache.set("orders:list_orders:Order:1", LINKS)
        await cache.set("orders:get_order:Order:2", LINKS)
        await cache.set("customers:get_customer:Customer:1", LINKS)

        deleted = await cache.delete_pattern("*:*:Order:1")

        assert deleted == 2
        assert (await cache.try_get("orders:get_order:Order:2"))[0] is True
        assert (await cache.try_get("customers:get_customer:Customer:1"))[0] is True

    @pytest.mark.asyncio
    async def test_clear(self, cache: InMemoryLinkCache) -> None:
        await cache.set("key1", LINKS)
        await cache.set("key2", LINKS)

        await cache.clear()

        assert len(cache) == 0

    def test_len(self) -> None:
        assert len(InMemoryLinkCache(maxsize=100)) == 0

    def test_maxsize_property(self) -> None:
        assert InMemoryLinkCache(maxsize=500).maxsize == 500
