"""Request bodies accepted by the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field

from reorderable_sections.models.section import Section


class SectionPayload(BaseModel):
    """A section as sent by clients."""

    header: Any
    elements: list[Any] = Field(default_factory=list)

    def to_section(self) -> Section:
        return Section(self.header, self.elements)


class CreateListRequest(BaseModel):
    """Body of POST /lists."""

    list_id: str | None = None
    sections: list[SectionPayload] = Field(default_factory=list)


class MoveRequest(BaseModel):
    """Body of POST /lists/{list_id}/move, in rest-space coordinates."""

    from_indices: list[int]
    to_offset: int


class DropRequest(BaseModel):
    """Body of POST /lists/{list_id}/drop, in full row coordinates."""

    source_rows: list[int]
    destination_row: int
