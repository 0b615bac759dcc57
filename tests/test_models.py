"""Tests for the section and item value models."""

import pytest

pytestmark = pytest.mark.unit

from reorderable_sections.models.item import Item, ItemKind
from reorderable_sections.models.section import Section


class TestSection:
    """Tests for the Section model."""

    def test_elements_stored_as_tuple(self):
        """Test that any iterable of elements is stored as a tuple."""
        section = Section("Active", ["A", "B"])
        assert section.header == "Active"
        assert section.elements == ("A", "B")

    def test_equality_ignores_sequence_type(self):
        """Test that list and tuple inputs produce equal sections."""
        assert Section("Active", ["A"]) == Section("Active", ("A",))
        assert Section("Active", ["A"]) != Section("Active", ["B"])
        assert Section("Active", ["A"]) != Section("Inactive", ["A"])

    def test_empty_elements(self):
        """Test that a section may have no elements."""
        section = Section("Empty")
        assert section.elements == ()
        assert len(section) == 0

    def test_immutable(self):
        """Test that sections cannot be modified after construction."""
        section = Section("Active", ["A"])
        with pytest.raises(AttributeError):
            section.header = "Other"

    def test_arbitrary_types(self):
        """Test that headers and elements are never inspected."""
        header = {"title": "Today", "color": "blue"}
        section = Section(header, [1, None, ("x", 2)])
        assert section.header is header
        assert section.to_tuple() == (header, [1, None, ("x", 2)])


class TestItem:
    """Tests for the Item model."""

    def test_header_factory(self):
        """Test creating a header item."""
        item = Item.header("Active", 0)
        assert item.kind is ItemKind.HEADER
        assert item.is_header
        assert not item.is_element
        assert item.value == "Active"
        assert item.id == 0

    def test_element_factory(self):
        """Test creating an element item."""
        item = Item.element("A", 1)
        assert item.kind is ItemKind.ELEMENT
        assert item.is_element
        assert not item.is_header

    def test_kind_values(self):
        """Test the serialized kind names."""
        assert ItemKind.HEADER.value == "header"
        assert ItemKind.ELEMENT.value == "element"

    def test_repr(self):
        """Test the compact representation."""
        assert repr(Item.header("Active", 0)) == "H('Active', 0)"
        assert repr(Item.element("A", 1)) == "E('A', 1)"
