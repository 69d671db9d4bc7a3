"""Request link context for Starlette/FastAPI requests."""

from typing import Any

from starlette.requests import Request


class RequestLinkContext:
    """ILinkContext implementation backed by a Starlette request.

    Routing identifiers are the group and handler names the endpoint
    was declared with, not URL paths.
    """

    def __init__(
        self,
        request: Request,
        group: str | None = None,
        handler: str | None = None,
    ) -> None:
        self._request = request
        self._group = group
        self._handler = handler

    @property
    def request(self) -> Request:
        return self._request

    @property
    def accept(self) -> str | None:
        return self._request.headers.get("accept")

    @property
    def route_group(self) -> str | None:
        return self._group

    @property
    def route_handler(self) -> str | None:
        return self._handler

    def url_for(self, name: str, /, **path_params: Any) -> str:
        """Build an absolute URL for a named route.

        Raises:
            starlette.routing.NoMatchFound: If no route matches.
        """
        return str(self._request.url_for(name, **path_params))

    async def is_disconnected(self) -> bool:
        return await self._request.is_disconnected()
