"""Assembly of characters into renderable, grid-allocated sheets."""

from vte_sheet.sheet.builder import SECTIONS, build_sheet, trait_widget
from vte_sheet.sheet.models import CharacterSheet, SheetSection

__all__ = [
    "SECTIONS",
    "CharacterSheet",
    "SheetSection",
    "build_sheet",
    "trait_widget",
]
