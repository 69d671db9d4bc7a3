"""Core interfaces (Protocol classes) for linkbuilder."""

from linkbuilder.core.interfaces.context import ILinkContext
from linkbuilder.core.interfaces.key_resolver import IKeyResolver
from linkbuilder.core.interfaces.link_builder import ILinkBuilder
from linkbuilder.core.interfaces.link_cache import ILinkCache
from linkbuilder.core.interfaces.resource import ICacheIdentifiable, ILinkable
from linkbuilder.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheIdentifiable",
    "IKeyResolver",
    "ILinkBuilder",
    "ILinkCache",
    "ILinkContext",
    "ILinkable",
    "ISerializer",
]
