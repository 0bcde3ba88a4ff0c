"""
Column-balancing grid allocator.

Distributes an ordered list of display items across a fixed number of
columns so that the columns are as even as possible. Leftover items (the
``N mod K`` remainder) go to the earliest columns, so eleven items in three
columns come out as 4, 4 and 3.

Items are consumed in column-major order: column 0 is filled top to bottom,
then column 1, and so on.

Field mapping
-------------
The allocator writes the column index into ``row`` (offset by the starting
row) and the position within the column into ``column``. This is the layout
the sheet renderers were built against: each allocated column becomes one
rendered line of the grid. ``rows_consumed`` still reports the length of the
longest column, which is what callers use to stack several grids.

Usage:
    from vte_sheet.layout.grid import allocate

    allocation = allocate(widgets, column_count=3, starting_row=1)
    next_row = 1 + allocation.rows_consumed
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from vte_sheet.errors import InvalidArgument

# =============================================================================
# ITEM TYPES
# =============================================================================


class GridItem(Protocol):
    """Anything the allocator can position.

    Position fields are 1-based and unset (``None``) until allocation.
    """

    row: int | None
    column: int | None
    row_span: int
    col_span: int


@dataclass
class GridCell:
    """A minimal positionable wrapper around arbitrary content."""

    content: Any = None
    row: int | None = None
    column: int | None = None
    row_span: int = 1
    col_span: int = 1


T = TypeVar("T", bound=GridItem)


@dataclass(frozen=True)
class GridAllocation:
    """Result of one allocation: the positioned items and the rows they use."""

    items: list[Any]
    rows_consumed: int


# =============================================================================
# ALLOCATION
# =============================================================================


def column_sizes(item_count: int, column_count: int) -> list[int]:
    """Return how many items each column receives.

    Raises:
        InvalidArgument: If ``column_count`` is below one or ``item_count``
            is negative.
    """
    if column_count < 1:
        raise InvalidArgument(f"column_count must be at least 1, got {column_count}")
    if item_count < 0:
        raise InvalidArgument(f"item_count cannot be negative, got {item_count}")

    quotient, remainder = divmod(item_count, column_count)
    return [quotient + (1 if c < remainder else 0) for c in range(column_count)]


def allocate(items: Sequence[T], column_count: int, starting_row: int = 1) -> GridAllocation:
    """
    Position ``items`` into ``column_count`` balanced columns.

    The i-th item of column ``c`` receives ``row = starting_row + c`` and
    ``column = i + 1``; spans are fixed at 1. Position fields of the passed
    items are set in place and the same objects are returned.

    Args:
        items: Items to position, in display order.
        column_count: Number of columns (must be >= 1).
        starting_row: Row offset for the first column.

    Returns:
        GridAllocation with the positioned items and ``rows_consumed``
        (the longest column's length; 0 for an empty list).

    Raises:
        InvalidArgument: If ``column_count`` is below one.
    """
    if column_count < 1:
        raise InvalidArgument(f"column_count must be at least 1, got {column_count}")

    # Columns past the item count stay empty; only the occupied ones are walked.
    quotient, remainder = divmod(len(items), column_count)
    occupied = min(column_count, len(items))

    positioned: list[T] = []
    index = 0
    for c in range(occupied):
        for i in range(quotient + (1 if c < remainder else 0)):
            item = items[index]
            item.row = starting_row + c
            item.column = i + 1
            item.row_span = 1
            item.col_span = 1
            positioned.append(item)
            index += 1

    rows_consumed = quotient + (1 if remainder else 0)
    return GridAllocation(items=positioned, rows_consumed=rows_consumed)


def stack_grids(
    groups: Iterable[Sequence[T]], column_count: int, starting_row: int = 1
) -> int:
    """
    Allocate several groups one below another.

    Each group starts where the previous one's ``rows_consumed`` left off.

    Returns:
        Total number of rows consumed by all groups.
    """
    row = starting_row
    for group in groups:
        row += allocate(group, column_count, starting_row=row).rows_consumed
    return row - starting_row


def cells(items: Iterable[T]) -> dict[tuple[int, int], T]:
    """Map positioned items by ``(row, column)``.

    Raises:
        InvalidArgument: If an item has not been positioned, or two items
            claim the same cell.
    """
    grid: dict[tuple[int, int], T] = {}
    for item in items:
        if item.row is None or item.column is None:
            raise InvalidArgument(f"item has not been positioned: {item!r}")
        key = (item.row, item.column)
        if key in grid:
            raise InvalidArgument(f"two items allocated to cell {key}")
        grid[key] = item
    return grid
