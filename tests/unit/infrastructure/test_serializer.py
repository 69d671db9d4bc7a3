"""Tests for JsonLinkSerializer."""

import json

import pytest

from linkbuilder import Link, SerializationError
from linkbuilder.infrastructure.serializers.json import JsonLinkSerializer


class TestJsonLinkSerializer:
    """Tests for JsonLinkSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonLinkSerializer:
        return JsonLinkSerializer()

    def test_serialize_format(self, serializer: JsonLinkSerializer) -> None:
        data = serializer.serialize([Link("/orders/1", "self", "GET")])

        assert json.loads(data) == [{"href": "/orders/1", "rel": "self", "method": "GET"}]

    def test_preserves_order(self, serializer: JsonLinkSerializer) -> None:
        links = [Link("/b", "b"), Link("/a", "a", "DELETE")]

        assert serializer.deserialize(serializer.serialize(links)) == links

    def test_serialize_non_link(self, serializer: JsonLinkSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.serialize([object()])  # type: ignore[list-item]

    def test_deserialize_invalid_json(self, serializer: JsonLinkSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(b"not json")

    def test_deserialize_malformed_link(self, serializer: JsonLinkSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(b'[{"rel": "self"}]')
