"""Storage layer for reorderable lists."""

from reorderable_sections.storage.registry import ListRegistry, get_registry, reset_registry

__all__ = ["ListRegistry", "get_registry", "reset_registry"]
