"""Tests for core entities."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from linkbuilder.core.entities import (
    CacheEntry,
    Directive,
    Link,
    LinkConfig,
    Policy,
    Scope,
)


class TestLink:
    """Tests for Link entity."""

    def test_structural_equality(self) -> None:
        assert Link("/orders/1", "self", "GET") == Link("/orders/1", "self", "GET")
        assert Link("/orders/1", "self", "GET") != Link("/orders/1", "self", "PUT")

    def test_immutable(self) -> None:
        link = Link("/orders/1", "self")
        with pytest.raises(FrozenInstanceError):
            link.href = "/orders/2"  # type: ignore[misc]

    def test_default_method(self) -> None:
        assert Link("/orders/1", "self").method == "GET"

    def test_from_dict(self) -> None:
        link = Link.from_dict({"href": "/orders/1", "rel": "cancel", "method": "POST"})
        assert link == Link("/orders/1", "cancel", "POST")
        assert link.to_dict() == {"href": "/orders/1", "rel": "cancel", "method": "POST"}


class TestDirective:
    """Tests for Directive and Scope."""

    def test_scope_ordering(self) -> None:
        assert Scope.GLOBAL < Scope.GROUP < Scope.HANDLER

    def test_defaults(self) -> None:
        directive = Directive()
        assert directive.policy is Policy.ON_DEMAND
        assert directive.caching_enabled is False
        assert directive.scope is Scope.GLOBAL

    def test_is_more_specific_than(self) -> None:
        handler = Directive(scope=Scope.HANDLER)
        group = Directive(scope=Scope.GROUP)
        assert handler.is_more_specific_than(group)
        assert not group.is_more_specific_than(handler)
        assert not group.is_more_specific_than(Directive(scope=Scope.GROUP))


class TestCacheEntry:
    """Tests for CacheEntry entity."""

    def test_create_cache_entry(self) -> None:
        links = [Link("/orders/1", "self")]
        entry = CacheEntry.create(key="k", links=links, ttl=timedelta(minutes=5))

        assert entry.key == "k"
        assert entry.value == (Link("/orders/1", "self"),)
        assert entry.ttl == timedelta(minutes=5)
        assert entry.created_at <= datetime.now(timezone.utc)

    def test_cache_entry_no_ttl(self) -> None:
        entry = CacheEntry.create(key="k", links=[])

        assert entry.ttl is None
        assert entry.value == ()


class TestLinkConfig:
    """Tests for LinkConfig."""

    def test_defaults(self) -> None:
        config = LinkConfig()

        assert config.enabled is True
        assert config.default_policy is Policy.ON_DEMAND
        assert config.caching_enabled is False
        assert config.default_ttl is None
        assert config.key_prefix is None

    def test_global_directive(self) -> None:
        config = LinkConfig(default_policy=Policy.ALWAYS, caching_enabled=True)

        assert config.global_directive() == Directive(
            policy=Policy.ALWAYS, caching_enabled=True, scope=Scope.GLOBAL
        )

    def test_rejects_non_positive_ttl(self) -> None:
        with pytest.raises(ValueError):
            LinkConfig(default_ttl=timedelta(0))
