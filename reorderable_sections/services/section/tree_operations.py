"""Conversions between grouped sections and the flat item sequence."""

from typing import Iterable, Sequence

from reorderable_sections.exceptions import ContractViolationError
from reorderable_sections.models.item import Item
from reorderable_sections.models.section import Section


class SectionTreeBuilder:
    """Flattens sections into items and rebuilds sections from items."""

    @staticmethod
    def flatten(sections: Iterable[Section]) -> tuple[Item, ...]:
        """
        Flatten sections into header and element items.

        Each section contributes its header followed by its elements. Ids are
        the 0-based position in the resulting sequence.

        Args:
            sections: Sections in display order

        Returns:
            Flat tuple of items (empty if there are no sections)
        """
        flat: list[Item] = []
        for section in sections:
            flat.append(Item.header(section.header, len(flat)))
            for element in section.elements:
                flat.append(Item.element(element, len(flat)))
        return tuple(flat)

    @staticmethod
    def enumerate_items(items: Iterable[Item]) -> tuple[Item, ...]:
        """
        Reassign ids from scratch so each id equals the item's position.

        Args:
            items: Items in their new order

        Returns:
            Tuple of items with fresh ids
        """
        return tuple(Item(item.kind, item.value, position) for position, item in enumerate(items))

    @staticmethod
    def rebuild(items: Sequence[Item]) -> tuple[Section, ...]:
        """
        Rebuild sections by scanning the flat sequence.

        A header closes the pending section (if any) and opens a new one;
        elements accumulate into the pending section.

        Args:
            items: Flat items, starting with a header when non-empty

        Returns:
            Tuple of sections in flat order

        Raises:
            ContractViolationError: If an element appears before any header
        """
        sections: list[Section] = []
        has_header = False
        current_header = None
        current_elements: list = []

        for position, item in enumerate(items):
            if item.is_header:
                if has_header:
                    sections.append(Section(current_header, current_elements))
                    current_elements = []
                current_header = item.value
                has_header = True
            else:
                if not has_header:
                    raise ContractViolationError(
                        f"Element {item.value!r} at position {position} precedes any header",
                        "items",
                    )
                current_elements.append(item.value)

        if has_header:
            sections.append(Section(current_header, current_elements))

        return tuple(sections)
