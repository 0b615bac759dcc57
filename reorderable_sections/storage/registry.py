"""In-memory registry of reorderable lists."""

import logging
import uuid
from typing import Iterable

from reorderable_sections.config import get_settings
from reorderable_sections.exceptions import DuplicateError, NotFoundError, ValidationError
from reorderable_sections.models.section import Section
from reorderable_sections.services.reorder_service import ReorderEngine

logger = logging.getLogger(__name__)


class ListRegistry:
    """Holds one ReorderEngine per list id for the lifetime of the process."""

    def __init__(self, max_lists: int | None = None):
        """
        Initialize registry.

        Args:
            max_lists: Maximum number of lists held at once. If None, uses settings.
        """
        if max_lists is None:
            max_lists = get_settings().max_lists
        self.max_lists = max_lists
        self._engines: dict[str, ReorderEngine] = {}

    def create(self, sections: Iterable[Section], list_id: str | None = None) -> tuple[str, ReorderEngine]:
        """
        Create a list from initial sections.

        Args:
            sections: Initial sections
            list_id: Optional list ID. If not provided, generates a UUID.

        Returns:
            Tuple of (list_id, engine)

        Raises:
            ValidationError: If list_id is empty or the registry is full
            DuplicateError: If a list with the same ID already exists
        """
        if list_id is None:
            list_id = str(uuid.uuid4())
        elif not list_id.strip():
            raise ValidationError("List ID cannot be empty", "list_id")

        if list_id in self._engines:
            raise DuplicateError("List", "id", list_id)
        if len(self._engines) >= self.max_lists:
            raise ValidationError(f"Registry is full ({self.max_lists} lists)", "list_id")

        engine = ReorderEngine(sections)
        self._engines[list_id] = engine
        logger.info("Created list %s with %d sections", list_id, engine.section_count)
        return list_id, engine

    def get(self, list_id: str) -> ReorderEngine:
        """
        Get a list's engine.

        Raises:
            NotFoundError: If the list does not exist
        """
        engine = self._engines.get(list_id)
        if engine is None:
            raise NotFoundError("List", list_id)
        return engine

    def delete(self, list_id: str) -> None:
        """
        Remove a list.

        Raises:
            NotFoundError: If the list does not exist
        """
        if self._engines.pop(list_id, None) is None:
            raise NotFoundError("List", list_id)
        logger.info("Deleted list %s", list_id)

    def list_ids(self) -> list[str]:
        """Get ids of all lists in creation order."""
        return list(self._engines)

    def __len__(self) -> int:
        return len(self._engines)


# Global registry instance
_registry: ListRegistry | None = None


def get_registry() -> ListRegistry:
    """Get or create the global registry instance."""
    global _registry
    if _registry is None:
        _registry = ListRegistry()
    return _registry


def reset_registry() -> None:
    """Reset the global registry instance (useful for testing)."""
    global _registry
    _registry = None
