"""Shared pytest fixtures and test utilities for reorderable section tests."""

from typing import Generator

import pytest

from reorderable_sections.config import get_settings
from reorderable_sections.models.section import Section
from reorderable_sections.services.list_view import ReorderableSectionedList
from reorderable_sections.services.reorder_service import ReorderEngine
from reorderable_sections.storage.registry import reset_registry


@pytest.fixture
def active_inactive_sections() -> list[Section]:
    """Two sections of three elements each."""
    return [
        Section("Active", ["A", "B", "C"]),
        Section("Inactive", ["D", "E", "F"]),
    ]


@pytest.fixture
def engine(active_inactive_sections) -> ReorderEngine:
    """Create an engine over the Active/Inactive sections."""
    return ReorderEngine(active_inactive_sections)


@pytest.fixture
def empty_engine() -> ReorderEngine:
    """Create an engine with no sections."""
    return ReorderEngine([])


@pytest.fixture
def view(engine) -> ReorderableSectionedList:
    """Create a view whose rows render as tagged strings."""
    return ReorderableSectionedList(
        engine,
        header_builder=lambda header: f"header:{header}",
        element_builder=lambda element: f"element:{element}",
    )


@pytest.fixture
def clean_registry() -> Generator[None, None, None]:
    """Reset the global registry and settings cache around a test."""
    reset_registry()
    get_settings.cache_clear()
    yield
    reset_registry()
    get_settings.cache_clear()


class AssertionHelpers:
    """Helper functions for test assertions."""

    @staticmethod
    def section_tuples(engine: ReorderEngine) -> list[tuple]:
        """Get sections as plain (header, [elements]) pairs."""
        return [section.to_tuple() for section in engine.sections]

    @staticmethod
    def assert_ids_contiguous(engine: ReorderEngine):
        """Assert item ids are exactly 0..n-1 in order."""
        assert [item.id for item in engine.items] == list(range(len(engine.items)))

    @staticmethod
    def assert_header_pinned(engine: ReorderEngine):
        """Assert the first item, if any, is a header."""
        if engine.items:
            assert engine.items[0].is_header

    @staticmethod
    def assert_consistent(engine: ReorderEngine):
        """Assert items and sections describe the same list."""
        flat = []
        for section in engine.sections:
            flat.append(("header", section.header))
            flat.extend(("element", element) for element in section.elements)
        assert [(item.kind.value, item.value) for item in engine.items] == flat


@pytest.fixture
def assertion_helpers():
    """Provide AssertionHelpers instance."""
    return AssertionHelpers
