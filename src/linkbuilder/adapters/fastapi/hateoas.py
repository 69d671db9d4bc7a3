"""HATEOAS link support for FastAPI endpoints."""

import functools
import inspect
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any, TypeVar

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from linkbuilder.adapters.fastapi.context import RequestLinkContext
from linkbuilder.core.entities.directive import Directive, Policy, Scope
from linkbuilder.core.entities.link_config import LinkConfig
from linkbuilder.core.exceptions import CacheNotConfiguredError
from linkbuilder.core.services.interceptor import ResponseInterceptor
from linkbuilder.core.services.registry import BuilderRegistry
from linkbuilder.core.services.scope import DirectiveTable, ScopeResolver

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Injected into endpoint signatures that do not take a Request
_REQUEST_PARAM = "__linkbuilder_request"


class Hateoas:
    """Link generation entry point for a FastAPI application.

    Holds the directive table for the application and decorates
    endpoints so their returned resources get links attached.

    Usage:
        registry = BuilderRegistry(cache=InMemoryLinkCache())
        registry.register(Order, OrderLinkBuilder())

        hateoas = Hateoas(registry)
        hateoas.group("orders", policy=Policy.ALWAYS, enable_caching=True)

        @router.get("/orders/{order_id}")
        @hateoas.hypermedia(group="orders")
        async def get_order(order_id: str) -> Order:
            ...
    """

    def __init__(
        self,
        registry: BuilderRegistry,
        config: LinkConfig | None = None,
    ) -> None:
        """Initialize and declare the global directive.

        Args:
            registry: The builder registry producing links.
            config: Optional configuration. Defaults to the registry's.

        Raises:
            CacheNotConfiguredError: If caching is enabled globally but
                the registry has no cache.
        """
        self._registry = registry
        self._config = config or registry.config
        self._directives = DirectiveTable()
        self._resolver = ScopeResolver()

        self._require_cache(self._config.caching_enabled)
        self._directives.set_global(self._config.global_directive())

    @property
    def registry(self) -> BuilderRegistry:
        return self._registry

    @property
    def config(self) -> LinkConfig:
        return self._config

    @property
    def directives(self) -> DirectiveTable:
        return self._directives

    def group(
        self,
        name: str,
        policy: Policy = Policy.ON_DEMAND,
        enable_caching: bool = False,
    ) -> None:
        """Declare the directive for a handler group.

        Raises:
            DuplicateDirectiveError: If the group already has one.
            CacheNotConfiguredError: If caching is requested without a cache.
        """
        self._require_cache(enable_caching)
        directive = Directive(
            policy=policy,
            caching_enabled=enable_caching,
            scope=Scope.GROUP,
        )
        self._directives.set_group(name, directive)

    def hypermedia(
        self,
        group: str | None = None,
        policy: Policy | None = None,
        enable_caching: bool = False,
        name: str | None = None,
    ) -> Callable[[F], F]:
        """Decorator attaching links to an endpoint's returned resource.

        Place it below the route decorator. When ``policy`` is given a
        handler-level directive is declared, overriding the group and
        global ones.

        Args:
            group: The handler group the endpoint belongs to.
            policy: Optional handler-level policy.
            enable_caching: Handler-level caching flag, used with ``policy``.
            name: Handler name. Defaults to the function name.

        Returns:
            Decorator function.
        """

        def decorator(func: F) -> F:
            handler = name or func.__name__

            if policy is not None:
                self._require_cache(enable_caching)
                self._directives.set_handler(
                    group,
                    handler,
                    Directive(
                        policy=policy,
                        caching_enabled=enable_caching,
                        scope=Scope.HANDLER,
                    ),
                )

            signature = inspect.signature(func)
            request_param = _find_request_param(signature)
            is_async = inspect.iscoroutinefunction(func)

            @functools.wraps(func)
            async def wrapper(*args: Any, **kwargs: Any) -> Any:
                if request_param is None:
                    request = kwargs.pop(_REQUEST_PARAM)
                else:
                    request = signature.bind_partial(*args, **kwargs).arguments[
                        request_param
                    ]

                if is_async:
                    result = await func(*args, **kwargs)
                else:
                    result = await run_in_threadpool(func, *args, **kwargs)

                return await self.attach(result, request, group, handler)

            if request_param is None:
                with_request = _with_request_param(signature)
                wrapper.__signature__ = with_request  # type: ignore[attr-defined]
                # Unwrapping would hide the injected parameter from FastAPI
                del wrapper.__wrapped__

            return wrapper  # type: ignore

        return decorator

    async def attach(
        self,
        result: Any,
        request: Request,
        group: str | None,
        handler: str | None,
    ) -> Any:
        """Run the governing directive's interceptor on a handler result.

        Args:
            result: The object returned by the endpoint.
            request: The current request.
            group: The handler group name.
            handler: The handler name.

        Returns:
            The result, with links attached when the directive allows it.
        """
        if not self._config.enabled or isinstance(result, Response):
            return result

        active = self._directives.active_for(group, handler)
        directive = self._resolver.resolve(active)
        if directive is None:
            return result

        interceptor = ResponseInterceptor(
            directive,
            self._registry,
            active_directives=active,
            scope_resolver=self._resolver,
        )
        context = RequestLinkContext(request, group=group, handler=handler)
        result = await interceptor.intercept(result, context)
        logger.debug(
            "Links %s for %s:%s", interceptor.state.value.lower(), group, handler
        )
        return result

    def startup(self, resource_types: Iterable[type] = ()) -> None:
        """Validate builders and close the directive table.

        Call from the application lifespan.

        Raises:
            UnregisteredBuilderError: If a resource type has no builder.
        """
        self._registry.validate(resource_types)
        self._directives.freeze()

    def _require_cache(self, enable_caching: bool) -> None:
        if enable_caching and self._registry.cache is None:
            raise CacheNotConfiguredError()


def add_hateoas(
    app: FastAPI,
    registry: BuilderRegistry,
    policy: Policy | None = None,
    enable_caching: bool | None = None,
) -> Hateoas:
    """Install link generation on a FastAPI application.

    The resulting Hateoas instance is stored on ``app.state.hateoas``.

    Args:
        app: The FastAPI application.
        registry: The builder registry producing links.
        policy: Application-wide policy. Defaults to the registry config.
        enable_caching: Application-wide caching flag. Defaults to the
            registry config.

    Returns:
        The Hateoas instance used to decorate endpoints.
    """
    config = registry.config
    if policy is not None:
        config = replace(config, default_policy=policy)
    if enable_caching is not None:
        config = replace(config, caching_enabled=enable_caching)

    hateoas = Hateoas(registry, config=config)
    app.state.hateoas = hateoas
    return hateoas


def _find_request_param(signature: inspect.Signature) -> str | None:
    for param in signature.parameters.values():
        if isinstance(param.annotation, type) and issubclass(param.annotation, Request):
            return param.name
    return None


def _with_request_param(signature: inspect.Signature) -> inspect.Signature:
    params = list(signature.parameters.values())
    request_param = inspect.Parameter(
        _REQUEST_PARAM,
        inspect.Parameter.KEYWORD_ONLY,
        annotation=Request,
    )
    # Keyword-only parameters must precede **kwargs
    if params and params[-1].kind is inspect.Parameter.VAR_KEYWORD:
        params.insert(len(params) - 1, request_param)
    else:
        params.append(request_param)
    return signature.replace(parameters=params)
