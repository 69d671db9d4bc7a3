"""Link value object."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Link:
    """Immutable hypermedia link.

    Created by a type-specific link builder and never mutated.
    Two links are equal when href, rel and method are equal.
    """

    href: str
    rel: str
    method: str = "GET"

    def to_dict(self) -> dict[str, str]:
        """Return the link as a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        """Create a Link from a dictionary produced by ``to_dict``.

        Args:
            data: Mapping with ``href``, ``rel`` and optional ``method``.

        Returns:
            A new Link instance.
        """
        return cls(
            href=str(data["href"]),
            rel=str(data["rel"]),
            method=str(data.get("method", "GET")),
        )
