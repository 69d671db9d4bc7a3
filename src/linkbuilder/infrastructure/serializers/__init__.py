"""Link set serializers."""

from linkbuilder.infrastructure.serializers.json import JsonLinkSerializer

__all__ = ["JsonLinkSerializer"]
