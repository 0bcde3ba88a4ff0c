"""
Unit tests for the column-balancing grid allocator (vte_sheet/layout/grid.py).

Tests cover:
- Column sizes for even and uneven item counts
- Position fields written by allocate (including the row/column mapping)
- rows_consumed and stacking of several groups
- Argument validation
- Projection of positioned items into a cell map
"""

import math

import pytest

from vte_sheet.errors import InvalidArgument
from vte_sheet.layout.grid import GridCell, allocate, cells, column_sizes, stack_grids


def _items(count: int) -> list[GridCell]:
    return [GridCell(content=i) for i in range(count)]


# ============================================================================
# COLUMN SIZES
# ============================================================================


@pytest.mark.unit
class TestColumnSizes:
    """Tests for column_sizes()."""

    def test_remainder_goes_to_first_columns(self):
        """Eleven items in three columns come out as 4, 4, 3."""
        assert column_sizes(11, 3) == [4, 4, 3]

    def test_even_split(self):
        assert column_sizes(9, 3) == [3, 3, 3]

    def test_fewer_items_than_columns(self):
        assert column_sizes(2, 4) == [1, 1, 0, 0]

    def test_zero_items(self):
        assert column_sizes(0, 3) == [0, 0, 0]

    @pytest.mark.parametrize("column_count", [0, -1])
    def test_column_count_below_one_rejected(self, column_count):
        with pytest.raises(InvalidArgument):
            column_sizes(5, column_count)

    def test_negative_item_count_rejected(self):
        with pytest.raises(InvalidArgument):
            column_sizes(-1, 3)


# ============================================================================
# ALLOCATION
# ============================================================================


@pytest.mark.unit
class TestAllocate:
    """Tests for allocate()."""

    @pytest.mark.parametrize("count", [1, 2, 5, 11, 12, 30])
    @pytest.mark.parametrize("column_count", [1, 2, 3, 7])
    def test_every_item_positioned_once(self, count, column_count):
        """Every item gets exactly one cell and rows_consumed is ceil(N/K)."""
        items = _items(count)

        result = allocate(items, column_count)

        assert len(result.items) == count
        assert all(item.row is not None and item.column is not None for item in items)
        assert len(cells(items)) == count
        assert result.rows_consumed == math.ceil(count / column_count)

    def test_column_index_goes_to_row(self):
        """Column c's i-th item lands at row=start+c, column=i+1."""
        items = _items(11)

        allocate(items, 3, starting_row=1)

        positions = [(item.row, item.column) for item in items]
        assert positions[:4] == [(1, 1), (1, 2), (1, 3), (1, 4)]
        assert positions[4:8] == [(2, 1), (2, 2), (2, 3), (2, 4)]
        assert positions[8:] == [(3, 1), (3, 2), (3, 3)]

    def test_items_consumed_in_order(self):
        items = _items(7)

        result = allocate(items, 3)

        assert [item.content for item in result.items] == list(range(7))

    def test_starting_row_offsets_rows(self):
        items = _items(4)

        allocate(items, 2, starting_row=10)

        assert sorted({item.row for item in items}) == [10, 11]

    def test_spans_reset_to_one(self):
        items = [GridCell(content="x", row_span=3, col_span=2)]

        allocate(items, 1)

        assert (items[0].row_span, items[0].col_span) == (1, 1)

    def test_items_mutated_in_place(self):
        items = _items(3)

        result = allocate(items, 2)

        assert all(a is b for a, b in zip(result.items, items))

    def test_empty_list(self):
        """An empty list consumes no rows and positions nothing."""
        result = allocate([], 3)

        assert result.items == []
        assert result.rows_consumed == 0

    def test_zero_columns_rejected_even_when_empty(self):
        with pytest.raises(InvalidArgument):
            allocate([], 0)

    def test_huge_column_count_only_walks_occupied_columns(self):
        items = _items(3)

        result = allocate(items, 10**12, starting_row=5)

        assert result.rows_consumed == 1
        assert [(c.row, c.column) for c in result.items] == [(5, 1), (6, 1), (7, 1)]


# ============================================================================
# STACKING AND CELLS
# ============================================================================


@pytest.mark.unit
class TestStackGrids:
    """Tests for stack_grids()."""

    def test_total_rows_is_sum_of_rows_consumed(self):
        groups = [_items(6), _items(9), _items(0), _items(2)]

        total = stack_grids(groups, 3)

        assert total == 2 + 3 + 0 + 1

    def test_each_group_starts_after_previous(self):
        first, second = _items(6), _items(3)

        stack_grids([first, second], 3, starting_row=1)

        assert min(item.row for item in first) == 1
        assert min(item.row for item in second) == 3


@pytest.mark.unit
class TestCells:
    """Tests for cells()."""

    def test_maps_positions_to_items(self):
        items = _items(3)
        allocate(items, 3)

        grid = cells(items)

        assert grid == {(1, 1): items[0], (2, 1): items[1], (3, 1): items[2]}

    def test_unpositioned_item_rejected(self):
        with pytest.raises(InvalidArgument):
            cells([GridCell(content="loose")])

    def test_duplicate_cell_rejected(self):
        items = [GridCell(row=1, column=1), GridCell(row=1, column=1)]

        with pytest.raises(InvalidArgument):
            cells(items)
