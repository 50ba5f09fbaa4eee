"""Public API for reading generic values from JSON input."""

from .facade import (
    InputType,
    JSONObjects,
    any_from,
    array_from,
    list_from,
    map_from,
)

__all__ = [
    "InputType",
    "JSONObjects",
    "any_from",
    "array_from",
    "list_from",
    "map_from",
]
