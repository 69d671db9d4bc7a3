"""linkbuilder - HATEOAS link generation and caching for Python APIs.

A Python library for attaching hypermedia links to API resources,
with per-endpoint link policies (always, on demand, never), Accept
header negotiation, per-type link builders, and cached link sets with
in-memory and Redis backends. Ships a FastAPI adapter.

Example with FastAPI:
    from fastapi import FastAPI
    from pydantic import BaseModel
    from linkbuilder import BuilderRegistry, InMemoryLinkCache, Link, Policy
    from linkbuilder.adapters.fastapi import add_hateoas

    class Order(BaseModel):
        id: str
        links: list[Link] = []

    class OrderLinks:
        def build_links(self, order, context):
            return [
                Link(context.url_for("get_order", order_id=order.id), "self", "GET"),
                Link(context.url_for("cancel_order", order_id=order.id), "cancel", "POST"),
            ]

    registry = BuilderRegistry(cache=InMemoryLinkCache())
    registry.register(Order, OrderLinks())

    app = FastAPI()
    hateoas = add_hateoas(app, registry, policy=Policy.ON_DEMAND)

    @app.get("/orders/{order_id}")
    @hateoas.hypermedia(group="orders", enable_caching=True, policy=Policy.ON_DEMAND)
    async def get_order(order_id: str) -> Order:
        return Order(id=order_id)

Clients request links with an Accept header naming ``hateoas``,
e.g. ``Accept: application/json, application/hateoas+json``.
"""

from linkbuilder.core.entities import (
    CacheEntry,
    Directive,
    Link,
    LinkConfig,
    Policy,
    Scope,
)
from linkbuilder.core.exceptions import (
    CacheNotConfiguredError,
    ConfigurationError,
    DuplicateBuilderError,
    DuplicateDirectiveError,
    LinkBuilderError,
    SerializationError,
    UndeterminableIdentityError,
    UnregisteredBuilderError,
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
from linkbuilder.core.services import (
    HATEOAS_TOKEN,
    BuilderRegistry,
    DirectiveTable,
    InterceptorState,
    ResponseInterceptor,
    ScopeResolver,
    accepts_hateoas,
)
from linkbuilder.infrastructure import (
    DefaultKeyResolver,
    InMemoryLinkCache,
    JsonLinkSerializer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheEntry",
    "Directive",
    "Link",
    "LinkConfig",
    "Policy",
    "Scope",
    # Errors
    "LinkBuilderError",
    "ConfigurationError",
    "UnregisteredBuilderError",
    "DuplicateBuilderError",
    "DuplicateDirectiveError",
    "CacheNotConfiguredError",
    "UndeterminableIdentityError",
    "SerializationError",
    # Core interfaces
    "ICacheIdentifiable",
    "IKeyResolver",
    "ILinkable",
    "ILinkBuilder",
    "ILinkCache",
    "ILinkContext",
    "ISerializer",
    # Core services
    "BuilderRegistry",
    "ResponseInterceptor",
    "InterceptorState",
    "ScopeResolver",
    "DirectiveTable",
    "HATEOAS_TOKEN",
    "accepts_hateoas",
    # Infrastructure implementations
    "InMemoryLinkCache",
    "DefaultKeyResolver",
    "JsonLinkSerializer",
]
