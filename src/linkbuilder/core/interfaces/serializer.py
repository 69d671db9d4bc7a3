"""Serializer interface."""

from typing import Protocol

from linkbuilder.core.entities.link import Link


class ISerializer(Protocol):
    """Contract for encoding link sets for byte-oriented cache stores."""

    def serialize(self, links: list[Link]) -> bytes:
        """Serialize links to bytes.

        Raises:
            SerializationError: If the links cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> list[Link]:
        """Deserialize bytes to links.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
