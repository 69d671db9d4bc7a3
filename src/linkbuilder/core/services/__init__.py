"""Domain services for linkbuilder."""

from linkbuilder.core.services.interceptor import InterceptorState, ResponseInterceptor
from linkbuilder.core.services.negotiation import HATEOAS_TOKEN, accepts_hateoas
from linkbuilder.core.services.registry import BuilderRegistry
from linkbuilder.core.services.scope import DirectiveTable, ScopeResolver

__all__ = [
    "BuilderRegistry",
    "ResponseInterceptor",
    "InterceptorState",
    # Content negotiation
    "HATEOAS_TOKEN",
    "accepts_hateoas",
    # Scope resolution
    "DirectiveTable",
    "ScopeResolver",
]
