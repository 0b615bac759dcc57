"""Move validation logic."""

from typing import Iterable, Sequence

from reorderable_sections.exceptions import ContractViolationError
from reorderable_sections.models.item import Item


class MoveValidator:
    """Validates move requests against the caller contract.

    Every check raises rather than clamps: a clamped index could carry a
    header out of place and break the header/element interleaving.
    """

    @staticmethod
    def validate_indices(from_indices: Iterable[int], count: int) -> None:
        """
        Validate source positions.

        Args:
            from_indices: Positions to move, in rest-space
            count: Number of items in rest-space

        Raises:
            ContractViolationError: If any index is not an int or is out of bounds
        """
        for index in from_indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise ContractViolationError(
                    f"Source index {index!r} must be an integer", "from_indices"
                )
            if index < 0 or index >= count:
                raise ContractViolationError(
                    f"Source index {index} out of range [0, {count})", "from_indices"
                )

    @staticmethod
    def validate_offset(to_offset: int, count: int, moved: int) -> None:
        """
        Validate the destination offset, measured after the moved items are removed.

        Args:
            to_offset: Insertion offset in rest-space
            count: Number of items in rest-space before removal
            moved: Number of distinct items being moved

        Raises:
            ContractViolationError: If to_offset is not an int or is out of range
        """
        if isinstance(to_offset, bool) or not isinstance(to_offset, int):
            raise ContractViolationError(
                f"Destination offset {to_offset!r} must be an integer", "to_offset"
            )
        upper = count - moved
        if to_offset < 0 or to_offset > upper:
            raise ContractViolationError(
                f"Destination offset {to_offset} out of range [0, {upper}]", "to_offset"
            )

    @staticmethod
    def validate_no_headers(rest: Sequence[Item], from_indices: Iterable[int]) -> None:
        """
        Validate that no moved position holds a header.

        Args:
            rest: Flat items without the pinned first item
            from_indices: Positions to move, already bounds-checked

        Raises:
            ContractViolationError: If a header would be moved
        """
        for index in from_indices:
            if rest[index].is_header:
                raise ContractViolationError(
                    f"Header {rest[index].value!r} at index {index} cannot be moved",
                    "from_indices",
                )
