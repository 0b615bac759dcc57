"""Flat list item model: a header or element value tagged with a positional id."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic

from reorderable_sections.models.section import ElementT, HeaderT


class ItemKind(str, Enum):
    """Kind of entry in the flat sequence."""

    HEADER = "header"
    ELEMENT = "element"


@dataclass(frozen=True)
class Item(Generic[HeaderT, ElementT]):
    """One row of the flat sequence.

    ``id`` is the item's position at the time the sequence was enumerated.
    It is unique within one flattening and is reassigned after every move,
    so it must not be used as identity across reorders.
    """

    kind: ItemKind
    value: Any
    id: int

    @classmethod
    def header(cls, value: HeaderT, id: int) -> "Item[HeaderT, ElementT]":
        """Create a header item."""
        return cls(ItemKind.HEADER, value, id)

    @classmethod
    def element(cls, value: ElementT, id: int) -> "Item[HeaderT, ElementT]":
        """Create an element item."""
        return cls(ItemKind.ELEMENT, value, id)

    @property
    def is_header(self) -> bool:
        return self.kind is ItemKind.HEADER

    @property
    def is_element(self) -> bool:
        return self.kind is ItemKind.ELEMENT

    def __repr__(self) -> str:
        tag = "H" if self.is_header else "E"
        return f"{tag}({self.value!r}, {self.id})"
