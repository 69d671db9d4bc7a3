"""Infrastructure layer implementations for linkbuilder."""

from linkbuilder.infrastructure.backends import InMemoryLinkCache
from linkbuilder.infrastructure.key_builders import DefaultKeyResolver
from linkbuilder.infrastructure.serializers import JsonLinkSerializer

__all__ = [
    "InMemoryLinkCache",
    "DefaultKeyResolver",
    "JsonLinkSerializer",
]
