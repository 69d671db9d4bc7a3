"""Resource capability interfaces."""

from typing import Protocol, runtime_checkable

from linkbuilder.core.entities.link import Link


@runtime_checkable
class ILinkable(Protocol):
    """A resource that carries a mutable list of links."""

    links: list[Link]


@runtime_checkable
class ICacheIdentifiable(Protocol):
    """A resource that supplies its own cache identity.

    Takes precedence over id field discovery when building cache keys.
    """

    def get_cache_key(self) -> str:
        """Return the identity part of the cache key."""
        ...
