"""Domain entities for linkbuilder."""

from linkbuilder.core.entities.cache_entry import CacheEntry
from linkbuilder.core.entities.directive import Directive, Policy, Scope
from linkbuilder.core.entities.link import Link
from linkbuilder.core.entities.link_config import LinkConfig

__all__ = [
    "CacheEntry",
    "Directive",
    "Link",
    "LinkConfig",
    "Policy",
    "Scope",
]
