"""Cache key resolver interface."""

from typing import Any, Protocol

from linkbuilder.core.interfaces.context import ILinkContext


class IKeyResolver(Protocol):
    """Contract for deriving cache keys for resources.

    Keys must be deterministic: the same resource and routing context
    always produce the same key.
    """

    def register_type(
        self,
        resource_type: type,
        id_field: str | None = None,
    ) -> None:
        """Resolve and remember the identity field for a resource type.

        Args:
            resource_type: The resource class.
            id_field: Explicit identity field name. When None, the
                conventional names are tried.
        """
        ...

    def compute_key(self, resource: Any, context: ILinkContext) -> str:
        """Build the cache key for a resource in a request context.

        Args:
            resource: The resource instance.
            context: The request context carrying routing identifiers.

        Returns:
            The cache key.

        Raises:
            UndeterminableIdentityError: If no identity can be derived.
        """
        ...

    def pattern_for(self, resource_type: type, identity: str | None = None) -> str:
        """Build a glob pattern matching keys of a type across routes."""
        ...
