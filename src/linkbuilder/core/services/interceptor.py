"""Response interceptor - attaches links to handler results."""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from linkbuilder.core.entities.directive import Directive, Policy
from linkbuilder.core.interfaces.context import ILinkContext
from linkbuilder.core.interfaces.resource import ILinkable
from linkbuilder.core.services.negotiation import accepts_hateoas
from linkbuilder.core.services.registry import BuilderRegistry
from linkbuilder.core.services.scope import ScopeResolver

logger = logging.getLogger(__name__)


class InterceptorState(Enum):
    """Lifecycle of a single interception."""

    PENDING = "PENDING"
    SKIPPED = "SKIPPED"
    RAN = "RAN"


class ResponseInterceptor:
    """Decides whether links run for one response and attaches them.

    Create one instance per response; the state is never shared. When
    several directives wrap the same response, only the interceptor of
    the most specific one does any work.
    """

    def __init__(
        self,
        directive: Directive,
        registry: BuilderRegistry,
        active_directives: Iterable[Directive] = (),
        scope_resolver: ScopeResolver | None = None,
    ) -> None:
        """Initialize the interceptor.

        Args:
            directive: The directive this interceptor acts for.
            registry: The builder registry generating the links.
            active_directives: All directives active for the response.
            scope_resolver: Optional resolver, mainly for tests.
        """
        self._directive = directive
        self._registry = registry
        self._active = tuple(active_directives)
        self._scope_resolver = scope_resolver or ScopeResolver()
        self._state = InterceptorState.PENDING

    @property
    def state(self) -> InterceptorState:
        return self._state

    @property
    def directive(self) -> Directive:
        return self._directive

    async def intercept(self, result: Any, context: ILinkContext) -> Any:
        """Attach links to a handler result when the directive allows it.

        Args:
            result: The object produced by the handler.
            context: The current request context.

        Returns:
            The same result object, with ``links`` replaced if links ran.

        Raises:
            RuntimeError: If called more than once.
        """
        if self._state is not InterceptorState.PENDING:
            raise RuntimeError("ResponseInterceptor instances are single-use")

        if not self._should_run(result, context):
            self._state = InterceptorState.SKIPPED
            return result

        links = await self._registry.generate(
            result,
            context,
            policy=self._directive.policy,
            caching_enabled=self._directive.caching_enabled,
        )
        result.links = links
        self._state = InterceptorState.RAN
        return result

    def _should_run(self, result: Any, context: ILinkContext) -> bool:
        directive = self._directive

        if self._scope_resolver.is_shadowed(directive, self._active):
            logger.debug(
                "Skipping links: %s directive is shadowed", directive.scope.name
            )
            return False

        if directive.policy is Policy.NEVER:
            return False

        if directive.policy is Policy.ON_DEMAND and not accepts_hateoas(context.accept):
            logger.debug("Skipping links: not requested by Accept header")
            return False

        return isinstance(result, ILinkable)
