"""Reorder engine owning the sections of one list and their flat item sequence."""

import logging
from typing import Callable, Generic, Iterable

from reorderable_sections.exceptions import ContractViolationError
from reorderable_sections.models.item import Item
from reorderable_sections.models.section import ElementT, HeaderT, Section
from reorderable_sections.services.section.reordering import SectionReorderer
from reorderable_sections.services.section.tree_operations import SectionTreeBuilder
from reorderable_sections.services.section.validation import MoveValidator

logger = logging.getLogger(__name__)

Subscriber = Callable[["ReorderEngine"], None]


class ReorderEngine(Generic[HeaderT, ElementT]):
    """Owns ``sections`` and the derived flat ``items`` and applies drag moves.

    Both views are replaced in full by each successful ``move``; nothing
    else mutates them. The first item is pinned: moves operate on
    ``items[1:]`` so the sequence always starts with a header.

    Item ids are positions. They are reassigned after every move and are
    not a stable identity across reorders.
    """

    def __init__(
        self,
        sections: Iterable[Section[HeaderT, ElementT]],
        validator: MoveValidator | None = None,
    ):
        """
        Initialize engine from the initial sections.

        Args:
            sections: Initial sections in display order
            validator: Optional move validator (default: MoveValidator())
        """
        self.tree_builder = SectionTreeBuilder()
        self.reorderer = SectionReorderer(validator)
        self._sections: tuple[Section[HeaderT, ElementT], ...] = tuple(sections)
        self._items: tuple[Item[HeaderT, ElementT], ...] = self.tree_builder.flatten(self._sections)
        self._subscribers: list[Subscriber] = []

    @property
    def items(self) -> tuple[Item[HeaderT, ElementT], ...]:
        """Flat header/element sequence with positional ids."""
        return self._items

    @property
    def sections(self) -> tuple[Section[HeaderT, ElementT], ...]:
        """Sections rebuilt from the current flat sequence."""
        return self._sections

    @property
    def section_count(self) -> int:
        return len(self._sections)

    @property
    def element_count(self) -> int:
        return sum(len(section.elements) for section in self._sections)

    def move(self, from_indices: Iterable[int], to_offset: int) -> None:
        """
        Move elements and rebuild sections.

        Positions are in rest-space: index 0 is ``items[1]``. The items at
        ``from_indices`` are removed and reinserted as a block at
        ``to_offset``, measured in the list left after removal.

        Args:
            from_indices: Rest-space positions of the elements to move
            to_offset: Rest-space insertion offset after removal

        Raises:
            ContractViolationError: If an index or the offset is out of range,
                or a header is among the moved positions. State is unchanged.
        """
        if not self._items:
            return

        indices = list(from_indices)
        try:
            reordered = self.reorderer.reorder(self._items, indices, to_offset)
        except ContractViolationError as e:
            logger.warning(
                "Rejected move of %s to offset %r: %s", sorted(indices, key=repr), to_offset, e
            )
            raise

        items = self.tree_builder.enumerate_items(reordered)
        sections = self.tree_builder.rebuild(items)

        self._items = items
        self._sections = sections
        logger.debug(
            "Moved %s to offset %d; %d sections, %d items",
            sorted(set(indices)),
            to_offset,
            len(sections),
            len(items),
        )
        self._notify()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked after every applied move.

        Args:
            callback: Called with this engine once state has been replaced

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    def __repr__(self) -> str:
        return f"<ReorderEngine(sections={self.section_count}, items={len(self._items)})>"
