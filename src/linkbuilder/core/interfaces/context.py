"""Request context interface."""

from typing import Any, Protocol


class ILinkContext(Protocol):
    """Read-only view of the current request.

    Supplied by a framework adapter. Exposes the negotiation header,
    routing identifiers and URL generation.
    """

    @property
    def accept(self) -> str | None:
        """The raw Accept header value, or None if absent."""
        ...

    @property
    def route_group(self) -> str | None:
        """Name of the handler group serving the request."""
        ...

    @property
    def route_handler(self) -> str | None:
        """Name of the handler serving the request."""
        ...

    def url_for(self, name: str, /, **path_params: Any) -> str:
        """Build an absolute URL for a named route.

        Args:
            name: The route name.
            **path_params: Values for the route's path parameters.

        Returns:
            The URL as a string.
        """
        ...

    async def is_disconnected(self) -> bool:
        """Check whether the client has gone away."""
        ...
