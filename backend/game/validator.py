"""Player move checks against a stored solution."""

from __future__ import annotations

from enum import Enum

from .grid import Grid


class MoveResult(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


def validate_move(solution: Grid, row: int, col: int, value: int) -> MoveResult:
    if value == solution.value_at(row, col):
        return MoveResult.CORRECT
    return MoveResult.INCORRECT


def is_complete(puzzle: Grid, solution: Grid) -> bool:
    """True once every cell of *puzzle* matches *solution*."""
    return puzzle == solution
