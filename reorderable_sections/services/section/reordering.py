"""Item reordering with the first item pinned in place."""

from typing import Iterable, Sequence, TypeVar

from reorderable_sections.models.item import Item
from reorderable_sections.services.section.validation import MoveValidator

T = TypeVar("T")


def relocate(sequence: Sequence[T], from_indices: Iterable[int], to_offset: int) -> list[T]:
    """
    Move a subset of positions to a target offset.

    The items at ``from_indices`` are removed, keeping their relative order,
    and reinserted as one contiguous block at ``to_offset`` in the list that
    remains after removal. Indices are assumed to be valid.

    Args:
        sequence: Source sequence (not mutated)
        from_indices: Positions to move; duplicates are ignored
        to_offset: Insertion offset in the post-removal list

    Returns:
        New list with the block relocated
    """
    moving = set(from_indices)
    moved = [value for index, value in enumerate(sequence) if index in moving]
    remaining = [value for index, value in enumerate(sequence) if index not in moving]
    return remaining[:to_offset] + moved + remaining[to_offset:]


class SectionReorderer:
    """Applies validated moves to a flat item sequence."""

    def __init__(self, validator: MoveValidator | None = None):
        """
        Initialize reorderer with a validator.

        Args:
            validator: Move validator (default: MoveValidator())
        """
        self.validator = validator or MoveValidator()

    def reorder(
        self,
        items: Sequence[Item],
        from_indices: Iterable[int],
        to_offset: int,
    ) -> list[Item]:
        """
        Relocate items while keeping ``items[0]`` fixed.

        Indices and offset are in rest-space, i.e. relative to ``items[1:]``.

        Args:
            items: Current flat items (non-empty)
            from_indices: Rest-space positions to move
            to_offset: Rest-space insertion offset, measured after removal

        Returns:
            New list of items, first item unchanged

        Raises:
            ContractViolationError: If indices or offset break the caller contract
        """
        first, rest = items[0], list(items[1:])
        indices = list(from_indices)
        self.validator.validate_indices(indices, len(rest))
        moving = set(indices)

        self.validator.validate_offset(to_offset, len(rest), len(moving))
        self.validator.validate_no_headers(rest, moving)

        return [first] + relocate(rest, moving, to_offset)
