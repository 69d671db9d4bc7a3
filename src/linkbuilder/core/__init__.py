"""Core domain layer for linkbuilder."""

from linkbuilder.core.entities import (
    CacheEntry,
    Directive,
    Link,
    LinkConfig,
    Policy,
    Scope,
)
from linkbuilder.core.interfaces import (
    ICacheIdentifiable,
    IKeyResolver,
    ILinkable,
    ILinkBuilder,
    ILinkCache,
    ILinkContext,
    ISerializer,
)
from linkbuilder.core.services import BuilderRegistry, ResponseInterceptor

__all__ = [
    # Entities
    "CacheEntry",
    "Directive",
    "Link",
    "LinkConfig",
    "Policy",
    "Scope",
    # Interfaces
    "ICacheIdentifiable",
    "IKeyResolver",
    "ILinkable",
    "ILinkBuilder",
    "ILinkCache",
    "ILinkContext",
    "ISerializer",
    # Services
    "BuilderRegistry",
    "ResponseInterceptor",
]
