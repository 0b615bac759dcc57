"""Tests for the headless sectioned list view and its drag policy."""

import pytest

pytestmark = pytest.mark.unit

from reorderable_sections.exceptions import ContractViolationError
from reorderable_sections.services.list_view import ReorderableSectionedList
from reorderable_sections.services.reorder_service import ReorderEngine


class TestRows:
    """Tests for row state and rendering."""

    def test_move_disabled_rows(self, view):
        """Test that row 0 and header rows cannot be dragged."""
        disabled = [row.index for row in view.rows() if row.move_disabled]
        assert disabled == [0, 4]

    def test_rows_follow_engine(self, view, engine):
        """Test that rows reflect the engine after a move."""
        engine.move({2}, 3)
        disabled = [row.index for row in view.rows() if row.move_disabled]
        assert disabled == [0, 3]

    def test_render_uses_builders(self, view):
        """Test that headers and elements go through their own builder."""
        assert view.render() == [
            "header:Active",
            "element:A",
            "element:B",
            "element:C",
            "header:Inactive",
            "element:D",
            "element:E",
            "element:F",
        ]

    def test_always_editing_without_deletion(self, view):
        """Test the fixed edit mode."""
        assert view.editing is True
        assert view.deletion_enabled is False

    def test_empty(self, empty_engine):
        """Test a view over an empty engine."""
        view = ReorderableSectionedList(empty_engine, str, str)
        assert view.rows() == []
        assert view.render() == []


class TestDrop:
    """Tests for drag gesture handling."""

    def test_drop_translates_to_rest_space(self, view, engine):
        """Test that row coordinates are shifted past the pinned first row."""
        view.drop({3}, 4)
        assert [s.to_tuple() for s in engine.sections] == [
            ("Active", ["A", "B"]),
            ("Inactive", ["C", "D", "E", "F"]),
        ]

    def test_drop_at_row_one(self, view, engine):
        """Test dropping directly below the first header."""
        view.drop({5}, 1)
        assert [s.to_tuple() for s in engine.sections] == [
            ("Active", ["D", "A", "B", "C"]),
            ("Inactive", ["E", "F"]),
        ]

    @pytest.mark.parametrize("source", [0, 4])
    def test_drag_disabled_row(self, view, engine, source):
        """Test that the first row and headers cannot be dragged."""
        items = engine.items
        with pytest.raises(ContractViolationError) as exc_info:
            view.drop({source}, 2)
        assert exc_info.value.field == "source_rows"
        assert engine.items is items

    def test_drop_at_first_row(self, view):
        """Test that nothing can be dropped at row 0."""
        with pytest.raises(ContractViolationError) as exc_info:
            view.drop({2}, 0)
        assert exc_info.value.field == "destination_row"

    @pytest.mark.parametrize("source", [8, -1, "2"])
    def test_bad_source_row(self, view, source):
        """Test out-of-range and non-integer rows."""
        with pytest.raises(ContractViolationError):
            view.drop({source}, 2)

    def test_destination_past_end(self, view):
        """Test that the engine rejects a destination past the last row."""
        with pytest.raises(ContractViolationError) as exc_info:
            view.drop({1}, 8)
        assert exc_info.value.field == "to_offset"

    def test_drop_on_empty_list(self):
        """Test that an empty drop on an empty list is a no-op."""
        engine = ReorderEngine([])
        view = ReorderableSectionedList(engine, str, str)
        view.drop(set(), 1)
        assert engine.items == ()
