"""Textual widgets for rendering character sheets."""

from vte_sheet.tui.widgets.auto_grid import AutoGrid
from vte_sheet.tui.widgets.dot_trait import Dot, DotTrait
from vte_sheet.tui.widgets.dropdown import DropdownTrait
from vte_sheet.tui.widgets.free_text import FreeTextTrait
from vte_sheet.tui.widgets.grid_element import EmptyCell, create_grid_element

__all__ = [
    "AutoGrid",
    "Dot",
    "DotTrait",
    "DropdownTrait",
    "EmptyCell",
    "FreeTextTrait",
    "create_grid_element",
]
