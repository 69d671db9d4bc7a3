"""Builder registry - main orchestrator for link generation."""

import logging
from collections.abc import Iterable
from typing import Any

from linkbuilder.core.entities.directive import Policy
from linkbuilder.core.entities.link import Link
from linkbuilder.core.entities.link_config import LinkConfig
from linkbuilder.core.exceptions import (
    CacheNotConfiguredError,
    DuplicateBuilderError,
    UnregisteredBuilderError,
)
from linkbuilder.core.interfaces.context import ILinkContext
from linkbuilder.core.interfaces.key_resolver import IKeyResolver
from linkbuilder.core.interfaces.link_builder import ILinkBuilder
from linkbuilder.core.interfaces.link_cache import ILinkCache
from linkbuilder.core.services.negotiation import accepts_hateoas

logger = logging.getLogger(__name__)


class BuilderRegistry:
    """Domain service that resolves link builders and produces link sets.

    Composes the per-type builders, content negotiation, key resolution
    and the optional link cache. Concurrent cache misses for the same
    key may each invoke the builder; the last write wins.
    """

    def __init__(
        self,
        cache: ILinkCache | None = None,
        key_resolver: IKeyResolver | None = None,
        config: LinkConfig | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            cache: Optional link cache. Required when caching is requested.
            key_resolver: The key resolver. Defaults to DefaultKeyResolver
                using the configured key prefix.
            config: Optional configuration. Uses defaults if not provided.
        """
        self._config = config or LinkConfig()
        self._cache = cache
        if key_resolver is None:
            from linkbuilder.infrastructure.key_builders.default import (
                DefaultKeyResolver,
            )

            key_resolver = DefaultKeyResolver(prefix=self._config.key_prefix)
        self._key_resolver = key_resolver
        self._builders: dict[type, ILinkBuilder] = {}

        # Statistics
        self._hits = 0
        self._misses = 0
        self._builds = 0

    @property
    def config(self) -> LinkConfig:
        """Get the link configuration."""
        return self._config

    @property
    def cache(self) -> ILinkCache | None:
        return self._cache

    @property
    def key_resolver(self) -> IKeyResolver:
        return self._key_resolver

    @property
    def stats(self) -> dict[str, int]:
        """Get link generation statistics.

        Returns:
            Dictionary with cache hits, misses and builder invocations.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "builds": self._builds,
        }

    def register(
        self,
        resource_type: type,
        builder: ILinkBuilder,
        id_field: str | None = None,
    ) -> None:
        """Register the link builder for a resource type.

        Args:
            resource_type: The resource class the builder handles.
            builder: The link builder.
            id_field: Optional explicit identity field for cache keys.

        Raises:
            DuplicateBuilderError: If the type already has a builder.
        """
        if resource_type in self._builders:
            raise DuplicateBuilderError(
                f"A link builder is already registered for {resource_type.__name__}"
            )
        self._builders[resource_type] = builder
        self._key_resolver.register_type(resource_type, id_field)

    def is_registered(self, resource_type: type) -> bool:
        return any(klass in self._builders for klass in resource_type.__mro__)

    def resolve(self, resource_type: type) -> ILinkBuilder:
        """Find the builder for a type, falling back along the MRO.

        Raises:
            UnregisteredBuilderError: If no builder handles the type.
        """
        for klass in resource_type.__mro__:
            builder = self._builders.get(klass)
            if builder is not None:
                return builder
        raise UnregisteredBuilderError([resource_type])

    def validate(self, resource_types: Iterable[type]) -> None:
        """Check at startup that every resource type has a builder.

        Raises:
            UnregisteredBuilderError: Listing every type without a builder.
        """
        missing = [t for t in resource_types if not self.is_registered(t)]
        if missing:
            raise UnregisteredBuilderError(missing)

    async def generate(
        self,
        resource: Any,
        context: ILinkContext,
        policy: Policy = Policy.ON_DEMAND,
        caching_enabled: bool = False,
    ) -> list[Link]:
        """Produce the links for a resource.

        Args:
            resource: The resource instance.
            context: The current request context.
            policy: The governing link policy.
            caching_enabled: Whether to go through the link cache.

        Returns:
            The links, or an empty list when the policy or negotiation
            rule out link generation.

        Raises:
            UnregisteredBuilderError: If no builder handles the type.
            CacheNotConfiguredError: If caching is requested without a cache.
            UndeterminableIdentityError: If no cache key can be derived.
        """
        if policy is Policy.NEVER:
            return []

        if policy is Policy.ON_DEMAND and not accepts_hateoas(context.accept):
            return []

        builder = self.resolve(type(resource))

        if not caching_enabled:
            return self._build(builder, resource, context)

        if self._cache is None:
            raise CacheNotConfiguredError()

        key = self._key_resolver.compute_key(resource, context)

        found, cached = await self._cache.try_get(key)
        if found:
            self._hits += 1
            logger.debug("Link cache hit for %s", key)
            return cached

        self._misses += 1
        logger.debug("Link cache miss for %s", key)

        links = self._build(builder, resource, context)

        if await context.is_disconnected():
            logger.warning("Request disconnected, not caching links for %s", key)
            return links

        await self._cache.set(key, links, self._config.default_ttl)
        return links

    async def invalidate(
        self,
        resource_type: type,
        identity: str | None = None,
    ) -> int:
        """Drop cached link sets for a type, or one resource of a type.

        Args:
            resource_type: The resource class.
            identity: Optional identity of a single resource.

        Returns:
            Number of entries removed.

        Raises:
            CacheNotConfiguredError: If no cache is configured.
        """
        if self._cache is None:
            raise CacheNotConfiguredError()
        pattern = self._key_resolver.pattern_for(resource_type, identity)
        return await self._cache.delete_pattern(pattern)

    def _build(
        self,
        builder: ILinkBuilder,
        resource: Any,
        context: ILinkContext,
    ) -> list[Link]:
        self._builds += 1
        return list(builder.build_links(resource, context))
