"""Tests for the OpenAPI links annotator."""

from dataclasses import dataclass

import pytest

pytest.importorskip("fastapi")

from linkbuilder.adapters.fastapi.schema import (  # noqa: E402
    annotate_links_schema,
    is_linkable_type,
)


@dataclass
class Plain:
    id: str


class TestAnnotateLinksSchema:
    """Tests for annotate_links_schema."""

    def test_adds_links_property(self, order) -> None:
        schema = {"type": "object", "properties": {"id": {"type": "string"}}}

        annotate_links_schema(schema, type(order))

        assert schema["properties"]["_links"] == {
            "type": "array",
            "items": {"type": "object"},
            "description": "Hypermedia links",
        }
        assert schema["properties"]["id"] == {"type": "string"}

    def test_creates_properties(self, order) -> None:
        schema: dict = {"type": "object"}

        annotate_links_schema(schema, type(order))

        assert "_links" in schema["properties"]

    def test_ignores_non_linkable_types(self) -> None:
        schema = {"type": "object", "properties": {}}

        annotate_links_schema(schema, Plain)

        assert schema == {"type": "object", "properties": {}}

    def test_is_linkable_type(self, order) -> None:
        assert is_linkable_type(type(order)) is True
        assert is_linkable_type(Plain) is False
