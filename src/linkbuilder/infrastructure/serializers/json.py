"""JSON serializer implementation."""

import json

from linkbuilder.core.entities.link import Link
from linkbuilder.core.exceptions import SerializationError


class JsonLinkSerializer:
    """JSON serializer for link sets.

    Encodes a list of links as a JSON array of objects with
    ``href``, ``rel`` and ``method`` keys.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, links: list[Link]) -> bytes:
        """Serialize links to bytes.

        Args:
            links: The links to serialize.

        Returns:
            The serialized links as bytes.

        Raises:
            SerializationError: If the links cannot be serialized.
        """
        try:
            json_str = json.dumps([link.to_dict() for link in links])
            return json_str.encode(self._encoding)
        except (AttributeError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize links: {e}") from e

    def deserialize(self, data: bytes) -> list[Link]:
        """Deserialize bytes to links.

        Args:
            data: The bytes to deserialize.

        Returns:
            The decoded links, in stored order.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            items = json.loads(data.decode(self._encoding))
            return [Link.from_dict(item) for item in items]
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize links: {e}") from e
        except (KeyError, TypeError, AttributeError) as e:
            raise SerializationError(f"Malformed link data: {e}") from e
