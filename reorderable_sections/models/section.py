"""Section model pairing a header with its ordered elements."""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar

HeaderT = TypeVar("HeaderT")
ElementT = TypeVar("ElementT")


@dataclass(frozen=True, init=False)
class Section(Generic[HeaderT, ElementT]):
    """A header value paired with an ordered, possibly empty, tuple of element values."""

    header: HeaderT
    elements: tuple[ElementT, ...]

    def __init__(self, header: HeaderT, elements: Iterable[ElementT] = ()):
        object.__setattr__(self, "header", header)
        object.__setattr__(self, "elements", tuple(elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"<Section(header={self.header!r}, elements={list(self.elements)!r})>"

    def to_tuple(self) -> tuple[Any, list[Any]]:
        """Return a plain ``(header, [elements])`` pair, handy in assertions and logs."""
        return self.header, list(self.elements)
