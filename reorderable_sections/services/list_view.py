"""Headless sectioned list view enforcing the drag policy over a ReorderEngine."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from reorderable_sections.exceptions import ContractViolationError
from reorderable_sections.models.item import Item
from reorderable_sections.models.section import ElementT, HeaderT
from reorderable_sections.services.reorder_service import ReorderEngine

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class Row:
    """A rendered list row in full (unsliced) coordinates."""

    index: int
    item: Item
    move_disabled: bool


class ReorderableSectionedList(Generic[HeaderT, ElementT, RowT]):
    """Rows and drag handling for a sectioned list.

    Row 0 and every header row are move-disabled. Drops arrive in full row
    coordinates and are translated to the engine's rest-space after the
    policy has been checked. The list is always in edit mode and never
    offers deletion.
    """

    editing = True
    deletion_enabled = False

    def __init__(
        self,
        engine: ReorderEngine[HeaderT, ElementT],
        header_builder: Callable[[HeaderT], RowT],
        element_builder: Callable[[ElementT], RowT],
    ):
        """
        Initialize the view.

        Args:
            engine: Engine holding the list state
            header_builder: Renders a header value into a row
            element_builder: Renders an element value into a row
        """
        self.engine = engine
        self.header_builder = header_builder
        self.element_builder = element_builder

    @staticmethod
    def is_move_disabled(index: int, item: Item) -> bool:
        """Check whether a row may not be dragged."""
        return index == 0 or item.is_header

    def rows(self) -> list[Row]:
        """Get all rows with their drag state."""
        return [
            Row(index, item, self.is_move_disabled(index, item))
            for index, item in enumerate(self.engine.items)
        ]

    def render(self) -> list[RowT]:
        """Render every row through the header or element builder."""
        rendered = []
        for item in self.engine.items:
            builder: Callable[[Any], RowT] = (
                self.header_builder if item.is_header else self.element_builder
            )
            rendered.append(builder(item.value))
        return rendered

    def drop(self, source_rows: Iterable[int], destination_row: int) -> None:
        """
        Handle a completed drag gesture.

        Args:
            source_rows: Full-coordinate rows being dragged
            destination_row: Full-coordinate insertion row, measured after the
                dragged rows are removed

        Raises:
            ContractViolationError: If a source row is move-disabled or out of
                range, or the destination is row 0
        """
        items = self.engine.items
        sources = list(source_rows)

        for row in sources:
            if isinstance(row, bool) or not isinstance(row, int):
                raise ContractViolationError(f"Row {row!r} must be an integer", "source_rows")
            if row < 0 or row >= len(items):
                raise ContractViolationError(
                    f"Row {row} out of range [0, {len(items)})", "source_rows"
                )
            if self.is_move_disabled(row, items[row]):
                raise ContractViolationError(f"Row {row} cannot be moved", "source_rows")

        if isinstance(destination_row, bool) or not isinstance(destination_row, int):
            raise ContractViolationError(
                f"Destination row {destination_row!r} must be an integer", "destination_row"
            )
        if destination_row <= 0:
            raise ContractViolationError(
                "Nothing can be dropped at or before the first row", "destination_row"
            )

        logger.debug("Drop rows %s at row %d", sorted(set(sources)), destination_row)
        self.engine.move([row - 1 for row in sources], destination_row - 1)
