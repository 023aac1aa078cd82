"""Sudoku placement rules and randomized backtracking search."""

from __future__ import annotations

import random
from typing import Optional

from ..game.grid import SIZE, Grid

DIGITS = tuple(range(1, SIZE + 1))


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The target cell itself is ignored, so an already placed value can be
    re-checked against the rest of the grid.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1-9)

    Returns:
        True if no other cell in the row, column or 3x3 box holds num
    """
    # Check row
    row_values = grid.row_values(row)
    del row_values[col]
    if num in row_values:
        return False

    # Check column
    col_values = grid.column_values(col)
    del col_values[row]
    if num in col_values:
        return False

    # Check 3x3 box
    box_values = grid.box_values(row, col)
    del box_values[(row % 3) * 3 + col % 3]
    if num in box_values:
        return False

    return True


def is_consistent(grid: Grid) -> bool:
    """Check existing non-zero values are mutually consistent."""
    for row in range(SIZE):
        for col in range(SIZE):
            num = grid.value_at(row, col)
            if num != 0 and not is_valid_placement(grid, row, col, num):
                return False
    return True


def has_dead_cell(grid: Grid) -> bool:
    """Check whether some empty cell has no legal digit left."""
    for row, col in grid.empty_cells():
        if not any(is_valid_placement(grid, row, col, num) for num in DIGITS):
            return True
    return False


class SudokuSolver:
    """Fills Sudoku grids by backtracking over shuffled candidates."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def fill(self, grid: Grid) -> bool:
        """
        Complete *grid* in place.

        Cells are visited in row-major order; non-zero cells are kept. Returns
        False when the grid cannot be completed, in which case it is left as
        it was passed in. Without an injected rng the process-wide generator
        orders the candidates.
        """
        return self._search(grid, self._rng if self._rng is not None else random)

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: Puzzle with 0 for empty cells (not modified)

        Returns:
            A completed copy if a solution exists, None otherwise. Candidates
            are tried in ascending order unless the solver was given an rng.
        """
        work = grid.copy()
        if self._search(work, self._rng):
            return work
        return None

    def _search(self, grid: Grid, rng) -> bool:
        if not is_consistent(grid) or has_dead_cell(grid):
            return False
        return self._fill_from(grid, 0, rng)

    def _fill_from(self, grid: Grid, index: int, rng) -> bool:
        """Recursively fill cells from *index* (0-80) onwards."""
        while index < SIZE * SIZE and grid.value_at(*divmod(index, SIZE)) != 0:
            index += 1
        if index == SIZE * SIZE:
            return True

        row, col = divmod(index, SIZE)

        for num in _candidates(rng):
            if is_valid_placement(grid, row, col, num):
                grid.set_value(row, col, num)

                if self._fill_from(grid, index + 1, rng):
                    return True

                grid.set_value(row, col, 0)

        return False


def _candidates(rng) -> list[int]:
    nums = list(DIGITS)
    if rng is not None:
        rng.shuffle(nums)
    return nums


def solve(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Grid]:
    """Convenience function to solve a Sudoku grid."""
    return SudokuSolver(rng).solve(grid)
