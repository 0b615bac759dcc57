"""State serialization for HTTP responses."""

from typing import Any

from reorderable_sections.models.item import Item
from reorderable_sections.models.section import Section
from reorderable_sections.services.list_view import Row
from reorderable_sections.services.reorder_service import ReorderEngine


def serialize_item(item: Item) -> dict[str, Any]:
    """
    Serialize a flat item.

    Args:
        item: Header or element item

    Returns:
        Dictionary with type, value and id
    """
    return {"type": item.kind.value, "value": item.value, "id": item.id}


def serialize_section(section: Section) -> dict[str, Any]:
    """Serialize a section to its header and element list."""
    return {"header": section.header, "elements": list(section.elements)}


def serialize_engine(engine: ReorderEngine, list_id: str | None = None) -> dict[str, Any]:
    """
    Serialize the full state of an engine.

    Args:
        engine: Engine to serialize
        list_id: Optional list ID to include

    Returns:
        Dictionary with items and sections (and id when given)
    """
    result: dict[str, Any] = {}
    if list_id is not None:
        result["id"] = list_id
    result["items"] = [serialize_item(item) for item in engine.items]
    result["sections"] = [serialize_section(section) for section in engine.sections]
    return result


def serialize_rows(rows: list[Row]) -> list[dict[str, Any]]:
    """Serialize view rows, adding each row's index and drag state."""
    return [
        {"index": row.index, "move_disabled": row.move_disabled, **serialize_item(row.item)}
        for row in rows
    ]
