"""Service layer for reordering logic and validation."""

from reorderable_sections.services.list_view import ReorderableSectionedList, Row
from reorderable_sections.services.reorder_service import ReorderEngine

__all__ = ["ReorderEngine", "ReorderableSectionedList", "Row"]
