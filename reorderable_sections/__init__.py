"""Sectioned, drag-reorderable lists with pinned headers."""

from reorderable_sections.exceptions import (
    ContractViolationError,
    DuplicateError,
    NotFoundError,
    ReorderServiceError,
    ValidationError,
)
from reorderable_sections.models import Item, ItemKind, Section
from reorderable_sections.services import ReorderableSectionedList, ReorderEngine, Row

__version__ = "0.1.0"

__all__ = [
    "Section",
    "Item",
    "ItemKind",
    "ReorderEngine",
    "ReorderableSectionedList",
    "Row",
    "ReorderServiceError",
    "ValidationError",
    "ContractViolationError",
    "NotFoundError",
    "DuplicateError",
]
