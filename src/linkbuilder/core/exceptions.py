"""Exceptions raised by linkbuilder."""


class LinkBuilderError(Exception):
    """Base class for all linkbuilder errors."""

    pass


class ConfigurationError(LinkBuilderError):
    """Raised when the link generation setup is inconsistent."""

    pass


class UnregisteredBuilderError(ConfigurationError):
    """Raised when no link builder is registered for a resource type."""

    def __init__(self, resource_types: list[type]) -> None:
        self.resource_types = resource_types
        names = ", ".join(t.__name__ for t in resource_types)
        super().__init__(f"No link builder is registered for: {names}")


class DuplicateBuilderError(ConfigurationError):
    """Raised when a second link builder is registered for a type."""

    pass


class DuplicateDirectiveError(ConfigurationError):
    """Raised when two directives share one scope for the same target."""

    pass


class CacheNotConfiguredError(ConfigurationError):
    """Raised when link caching is requested without a cache backend."""

    def __init__(self) -> None:
        super().__init__(
            "Link caching was requested, but no link cache was configured."
        )


class UndeterminableIdentityError(LinkBuilderError):
    """Raised when a cache key cannot be derived for a resource."""

    def __init__(self, resource_type: type) -> None:
        self.resource_type = resource_type
        super().__init__(
            f"Cannot determine cache key for {resource_type.__name__}. "
            "Add an id field or implement get_cache_key()."
        )


class SerializationError(LinkBuilderError):
    """Raised when serialization or deserialization fails."""

    pass
