"""Link cache backends.

The Redis backend needs the ``redis`` extra and is imported from
``linkbuilder.infrastructure.backends.redis_cache`` directly.
"""

from linkbuilder.infrastructure.backends.memory import InMemoryLinkCache

__all__ = ["InMemoryLinkCache"]
