"""
Textual grid that places allocated widgets at their positions.

The allocator numbers rows from each section's starting row, so the grid
normalises rows to start at one before laying them out. Gaps (the short
trailing columns of an uneven allocation) are filled with empty cells.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from textual.app import ComposeResult
from textual.containers import Grid

from vte_sheet.layout.grid import cells
from vte_sheet.tui.widgets.grid_element import EmptyCell, create_grid_element


class AutoGrid(Grid):
    """Grid of trait widgets built from positioned widget descriptions."""

    DEFAULT_CSS = """
    AutoGrid {
        height: auto;
        grid-gutter: 0 2;
        grid-rows: auto;
        padding: 0 1;
    }
    """

    def __init__(self, widgets: Sequence[Any], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        grid = cells(widgets)
        if grid:
            first_row = min(row for row, _ in grid)
            self.positions = {(row - first_row + 1, col): w for (row, col), w in grid.items()}
        else:
            self.positions = {}
        self.row_count = max((row for row, _ in self.positions), default=0)
        self.column_count = max((col for _, col in self.positions), default=0)
        self.styles.grid_size_columns = max(self.column_count, 1)
        self.styles.grid_size_rows = max(self.row_count, 1)

    def compose(self) -> ComposeResult:
        for row in range(1, self.row_count + 1):
            for column in range(1, self.column_count + 1):
                widget = self.positions.get((row, column))
                yield create_grid_element(widget) if widget is not None else EmptyCell()
