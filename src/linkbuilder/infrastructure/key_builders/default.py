"""Default cache key resolver implementation."""

import re
from typing import Any

from linkbuilder.core.exceptions import UndeterminableIdentityError
from linkbuilder.core.interfaces.context import ILinkContext
from linkbuilder.core.interfaces.resource import ICacheIdentifiable
from linkbuilder.utils.fields import declared_fields, snake_case

_GLOB_CHARS = re.compile(r"([*?\[])")


def conventional_id_fields(resource_type: type) -> tuple[str, ...]:
    """Return the candidate identity field names for a type, in order."""
    name = resource_type.__name__
    return ("Id", "id", f"{name}Id", f"{snake_case(name)}_id")


class DefaultKeyResolver:
    """Default key resolver using the resource id and routing context.

    Keys have the form ``{group}:{handler}:{TypeName}:{identity}``,
    optionally preceded by a prefix. Identity fields are resolved once
    per type by ``register_type``.
    """

    def __init__(self, prefix: str | None = None) -> None:
        """Initialize the key resolver.

        Args:
            prefix: Optional prefix for all cache keys.
        """
        self._prefix = prefix
        self._id_fields: dict[type, str | None] = {}

    def register_type(
        self,
        resource_type: type,
        id_field: str | None = None,
    ) -> None:
        """Resolve and remember the identity field for a resource type.

        Args:
            resource_type: The resource class.
            id_field: Explicit identity field name. When None, the
                conventional names are tried against the declared fields.
        """
        self._id_fields[resource_type] = id_field or self._find_id_field(
            resource_type
        )

    def id_field_for(self, resource_type: type) -> str | None:
        """Return the identity field name used for a type, if any."""
        if resource_type in self._id_fields:
            return self._id_fields[resource_type]
        return self._find_id_field(resource_type)

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
        resource_type = type(resource)
        identity = self._identity(resource, resource_type)

        parts = [
            context.route_group or "",
            context.route_handler or "",
            resource_type.__name__,
            identity,
        ]
        if self._prefix:
            parts.insert(0, self._prefix)

        return ":".join(parts)

    def pattern_for(self, resource_type: type, identity: str | None = None) -> str:
        """Build a glob pattern matching keys of a type across routes.

        Args:
            resource_type: The resource class.
            identity: Optional identity to narrow the match to one resource.

        Returns:
            A glob pattern for ``delete_pattern``.
        """
        # Identity is matched literally
        literal = _GLOB_CHARS.sub(r"[\1]", identity) if identity else "*"
        parts = ["*", "*", resource_type.__name__, literal]
        if self._prefix:
            parts.insert(0, self._prefix)
        return ":".join(parts)

    def _identity(self, resource: Any, resource_type: type) -> str:
        if isinstance(resource, ICacheIdentifiable):
            custom = resource.get_cache_key()
            if custom is None or not custom.strip():
                raise UndeterminableIdentityError(resource_type)
            return custom

        field = self.id_field_for(resource_type)
        if field is None:
            raise UndeterminableIdentityError(resource_type)

        value = getattr(resource, field, None)
        if value is None:
            raise UndeterminableIdentityError(resource_type)

        identity = value if isinstance(value, str) else str(value)
        if not identity.strip():
            raise UndeterminableIdentityError(resource_type)

        return identity

    @staticmethod
    def _find_id_field(resource_type: type) -> str | None:
        declared = declared_fields(resource_type)
        for candidate in conventional_id_fields(resource_type):
            if candidate in declared:
                return candidate
        return None
