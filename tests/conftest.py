"""Shared fixtures and grids for the test suite."""

import random

import pytest

from backend.game.grid import Grid

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def assert_valid_solution(grid: Grid) -> None:
    """Every row, column and box holds the digits 1-9 exactly once."""
    digits = list(range(1, 10))
    for i in range(9):
        assert sorted(grid.row_values(i)) == digits
        assert sorted(grid.column_values(i)) == digits
    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            assert sorted(grid.box_values(box_row, box_col)) == digits


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def puzzle_grid():
    return Grid(PUZZLE)


@pytest.fixture
def solution_grid():
    return Grid(SOLUTION)
