"""OpenAPI schema support for linkable resources."""

from typing import Any

from linkbuilder.utils.fields import declared_fields

LINKS_SCHEMA_FIELD = "_links"


def is_linkable_type(model: type) -> bool:
    """Check if a class declares a ``links`` field."""
    return "links" in declared_fields(model)


def annotate_links_schema(schema: dict[str, Any], model: type) -> None:
    """Add a ``_links`` array property to a linkable model's JSON schema.

    Intended for pydantic's ``json_schema_extra``::

        class Order(BaseModel):
            model_config = ConfigDict(json_schema_extra=annotate_links_schema)

            id: str
            links: list[Link] = []

    Args:
        schema: The JSON schema generated for ``model``; updated in place.
        model: The model class the schema describes.
    """
    if not is_linkable_type(model):
        return

    properties = schema.setdefault("properties", {})
    properties[LINKS_SCHEMA_FIELD] = {
        "type": "array",
        "items": {"type": "object"},
        "description": "Hypermedia links",
    }
