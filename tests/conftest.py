"""Pytest configuration for linkbuilder tests."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from linkbuilder import Link


@dataclass
class Order:
    """Linkable resource used across tests."""

    id: str
    links: list[Link] = field(default_factory=list)


class StubContext:
    """In-memory ILinkContext for tests."""

    def __init__(
        self,
        accept: str | None = None,
        group: str | None = "orders",
        handler: str | None = "get_order",
        disconnected: bool = False,
    ) -> None:
        self.accept = accept
        self.route_group = group
        self.route_handler = handler
        self.disconnected = disconnected

    def url_for(self, name: str, /, **path_params: Any) -> str:
        suffix = "/".join(str(v) for v in path_params.values())
        return f"http://testserver/{name}/{suffix}"

    async def is_disconnected(self) -> bool:
        return self.disconnected


class CountingOrderBuilder:
    """Order link builder that counts invocations."""

    def __init__(self) -> None:
        self.calls = 0

    def build_links(self, resource: Order, context: Any) -> list[Link]:
        self.calls += 1
        return [
            Link(context.url_for("get_order", order_id=resource.id), "self", "GET"),
            Link(context.url_for("cancel_order", order_id=resource.id), "cancel", "POST"),
        ]


@pytest.fixture
def order() -> Order:
    return Order(id="42")


@pytest.fixture
def order_builder() -> CountingOrderBuilder:
    return CountingOrderBuilder()


@pytest.fixture
def make_context() -> type[StubContext]:
    """Factory for request contexts."""
    return StubContext
