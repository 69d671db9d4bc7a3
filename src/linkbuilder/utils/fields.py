"""Field discovery utilities for resource types."""

import dataclasses
import re


def declared_fields(resource_type: type) -> set[str]:
    """Collect the field names a class declares.

    Covers dataclasses, pydantic models, plain annotated classes and
    properties. Only class-level declarations are read; instances are
    never inspected.

    Args:
        resource_type: The class to inspect.

    Returns:
        The set of declared field names.
    """
    names: set[str] = set()
    if dataclasses.is_dataclass(resource_type):
        names.update(f.name for f in dataclasses.fields(resource_type))
    model_fields = getattr(resource_type, "model_fields", None)
    if isinstance(model_fields, dict):
        names.update(model_fields)
    for klass in resource_type.__mro__:
        names.update(getattr(klass, "__annotations__", {}))
        names.update(
            name for name, value in vars(klass).items() if isinstance(value, property)
        )
    return names


def snake_case(name: str) -> str:
    """Convert a CamelCase class name to snake_case."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
