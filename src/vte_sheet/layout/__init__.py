"""Grid layout helpers for arranging trait widgets."""

from vte_sheet.layout.grid import (
    GridAllocation,
    GridCell,
    GridItem,
    allocate,
    cells,
    column_sizes,
    stack_grids,
)

__all__ = [
    "GridAllocation",
    "GridCell",
    "GridItem",
    "allocate",
    "cells",
    "column_sizes",
    "stack_grids",
]
