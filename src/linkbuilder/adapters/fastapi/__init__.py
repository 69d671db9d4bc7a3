"""FastAPI framework adapter for linkbuilder."""

from linkbuilder.adapters.fastapi.context import RequestLinkContext
from linkbuilder.adapters.fastapi.hateoas import Hateoas, add_hateoas
from linkbuilder.adapters.fastapi.schema import (
    LINKS_SCHEMA_FIELD,
    annotate_links_schema,
    is_linkable_type,
)

__all__ = [
    "Hateoas",
    "add_hateoas",
    "RequestLinkContext",
    # OpenAPI
    "LINKS_SCHEMA_FIELD",
    "annotate_links_schema",
    "is_linkable_type",
]
