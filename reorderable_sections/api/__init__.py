"""HTTP API module with request schemas and serializers."""

from reorderable_sections.api.serializers import (
    serialize_engine,
    serialize_item,
    serialize_rows,
    serialize_section,
)

__all__ = [
    "serialize_engine",
    "serialize_item",
    "serialize_rows",
    "serialize_section",
]
