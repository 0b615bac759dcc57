"""Value models for reorderable section lists."""

from reorderable_sections.models.item import Item, ItemKind
from reorderable_sections.models.section import Section

__all__ = ["Section", "Item", "ItemKind"]
