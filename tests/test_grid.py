"""Tests for the 9x9 grid model."""

import pytest

from backend.errors import InvalidGridError, InvalidIndexError, InvalidValueError
from backend.game.grid import Grid
from conftest import PUZZLE


class TestGridConstruction:
    """Tests for building grids."""

    def test_empty_grid_is_all_zero(self):
        grid = Grid.empty()

        assert grid.filled_count() == 0
        assert grid.to_list() == [[0] * 9 for _ in range(9)]
        assert len(grid.empty_cells()) == 81

    def test_from_nested_lists(self):
        grid = Grid(PUZZLE)

        assert grid.to_list() == PUZZLE
        assert grid.filled_count() == 30

    @pytest.mark.parametrize(
        "cells",
        [
            [],
            [[0] * 9 for _ in range(8)],
            [[0] * 8 for _ in range(9)],
            [[0] * 9 for _ in range(8)] + [[0] * 8],
            [[10] + [0] * 8] + [[0] * 9 for _ in range(8)],
            [[-1] + [0] * 8] + [[0] * 9 for _ in range(8)],
            [["x"] * 9 for _ in range(9)],
        ],
    )
    def test_rejects_malformed_grids(self, cells):
        with pytest.raises(InvalidGridError):
            Grid(cells)

    def test_rejects_huge_integers(self):
        cells = [[0] * 9 for _ in range(9)]
        cells[0][0] = 10**20

        with pytest.raises(InvalidGridError):
            Grid(cells)

    def test_malformed_grid_is_a_value_error(self):
        with pytest.raises(ValueError):
            Grid([[1, 2, 3]])


class TestGridAccess:
    """Tests for cell and group accessors."""

    def test_value_at_and_set_value(self):
        grid = Grid.empty()
        grid.set_value(4, 7, 6)

        assert grid.value_at(4, 7) == 6
        assert grid.filled_count() == 1

        grid.set_value(4, 7, 0)
        assert grid.value_at(4, 7) == 0

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (9, 0), (0, 9)])
    def test_out_of_range_index_fails(self, row, col):
        grid = Grid.empty()

        with pytest.raises(InvalidIndexError):
            grid.value_at(row, col)
        with pytest.raises(IndexError):
            grid.set_value(row, col, 1)

    @pytest.mark.parametrize("value", [-1, 10])
    def test_out_of_range_value_fails(self, value):
        with pytest.raises(InvalidValueError):
            Grid.empty().set_value(0, 0, value)

    def test_group_views(self, puzzle_grid):
        assert puzzle_grid.row_values(0) == [5, 3, 0, 0, 7, 0, 0, 0, 0]
        assert puzzle_grid.column_values(0) == [5, 6, 0, 8, 4, 7, 0, 0, 0]
        assert puzzle_grid.box_values(0, 0) == [5, 3, 0, 6, 0, 0, 0, 9, 8]
        # Any cell of a box yields the same box.
        assert puzzle_grid.box_values(4, 5) == [0, 6, 0, 8, 0, 3, 0, 2, 0]
        assert puzzle_grid.box_values(3, 3) == puzzle_grid.box_values(5, 5)

    def test_group_views_are_detached(self, puzzle_grid):
        row = puzzle_grid.row_values(0)
        row[2] = 9

        assert puzzle_grid.value_at(0, 2) == 0

    def test_box_index_checked(self):
        with pytest.raises(InvalidIndexError):
            Grid.empty().box_values(9, 0)


class TestGridHelpers:
    """Tests for copies, equality and counting."""

    def test_copy_is_independent(self, puzzle_grid):
        clone = puzzle_grid.copy()
        clone.set_value(0, 2, 4)

        assert clone != puzzle_grid
        assert puzzle_grid.value_at(0, 2) == 0

    def test_equality(self):
        assert Grid(PUZZLE) == Grid(PUZZLE)
        assert Grid(PUZZLE) != Grid.empty()

    def test_empty_cells_row_major(self):
        grid = Grid(PUZZLE)
        cells = grid.empty_cells()

        assert len(cells) == 51
        assert cells[:3] == [(0, 2), (0, 3), (0, 5)]
        assert cells == sorted(cells)

    def test_digit_counts(self, solution_grid, puzzle_grid):
        assert solution_grid.digit_counts() == {d: 9 for d in range(1, 10)}
        assert puzzle_grid.digit_counts()[5] == 3
        assert sum(puzzle_grid.digit_counts().values()) == 30
