"""Pydantic models describing a rendered character sheet."""

from __future__ import annotations

from pydantic import BaseModel, Field

from vte_sheet.traits.widgets import TraitWidget


class SheetSection(BaseModel):
    """
    One titled grid of widgets.

    Attributes:
        title: Section heading ("Attributes", "Skills"...).
        starting_row: Row the section's allocation started at.
        rows_consumed: Rows reported by the allocator for this section.
        widgets: Positioned widgets in allocation order.
    """

    title: str
    starting_row: int
    rows_consumed: int
    widgets: list[TraitWidget] = Field(default_factory=list)


class CharacterSheet(BaseModel):
    """A character laid out as stacked sections."""

    character_id: str
    templates: list[str] = Field(default_factory=list)
    column_count: int
    sections: list[SheetSection] = Field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return sum(section.rows_consumed for section in self.sections)

    def section(self, title: str) -> SheetSection | None:
        for section in self.sections:
            if section.title == title:
                return section
        return None
