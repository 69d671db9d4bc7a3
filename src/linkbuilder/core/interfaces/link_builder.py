"""Link builder interface."""

from typing import Any, Protocol

from linkbuilder.core.entities.link import Link
from linkbuilder.core.interfaces.context import ILinkContext


class ILinkBuilder(Protocol):
    """Contract for per-type link building strategies.

    One builder is registered per resource type. Builders are expected
    to be cheap, deterministic functions of the resource and context,
    since concurrent cache misses may invoke them more than once.
    """

    def build_links(self, resource: Any, context: ILinkContext) -> list[Link]:
        """Build the links for a resource.

        Args:
            resource: The resource instance being returned.
            context: The request context, used to turn route names
                into URLs.

        Returns:
            The links for the resource, in presentation order.
        """
        ...
