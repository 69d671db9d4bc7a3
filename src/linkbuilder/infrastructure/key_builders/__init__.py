"""Cache key resolvers."""

from linkbuilder.infrastructure.key_builders.default import DefaultKeyResolver

__all__ = ["DefaultKeyResolver"]
