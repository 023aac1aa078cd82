"""Solution generation and puzzle derivation."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidClueCountError, UnknownDifficultyError
from ..solver.backtracking import SudokuSolver
from .grid import SIZE, Grid

_LOGGER = logging.getLogger(__name__)

CELL_COUNT = SIZE * SIZE

# Clues left on the board per difficulty. The lower levels go below 17, so
# those puzzles are not guaranteed to have a single solution.
DIFFICULTIES: dict[str, int] = {
    "easy": 40,
    "medium": 30,
    "hard": 20,
    "expert": 15,
    "master": 12,
    "extreme": 8,
}


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A solution together with the puzzle derived from it."""

    difficulty: str
    solution: Grid
    puzzle: Grid
    original: Grid

    @property
    def clue_count(self) -> int:
        return self.original.filled_count()


def clue_count_for(difficulty: str) -> int:
    try:
        return DIFFICULTIES[difficulty]
    except KeyError:
        raise UnknownDifficultyError(
            f"Unknown difficulty '{difficulty}'. "
            f"Expected one of: {', '.join(DIFFICULTIES)}"
        ) from None


def validate_clue_count(clue_count: int) -> None:
    if not 0 <= clue_count <= CELL_COUNT:
        raise InvalidClueCountError(
            f"Clue count {clue_count} out of range 0-{CELL_COUNT}"
        )


def generate_solution(rng: Optional[random.Random] = None) -> Grid:
    """Build a complete, valid grid by randomized backtracking."""
    grid = Grid.empty()
    if not SudokuSolver(rng).fill(grid):
        # An empty grid always has a completion.
        raise RuntimeError("Backtracking failed to complete an empty grid")
    return grid


def derive_puzzle(
    solution: Grid,
    clue_count: int,
    rng: Optional[random.Random] = None,
) -> tuple[Grid, Grid]:
    """
    Remove values from a copy of *solution* until *clue_count* clues remain.

    Cells are drawn uniformly at random; already empty cells are redrawn.
    The result may admit more than one completion.

    Returns:
        (puzzle, original) where original is an independent snapshot of puzzle
    """
    validate_clue_count(clue_count)
    rng = rng if rng is not None else random

    puzzle = solution.copy()
    target = CELL_COUNT - clue_count
    removed = 0

    while removed < target:
        row = rng.randrange(SIZE)
        col = rng.randrange(SIZE)

        if puzzle.value_at(row, col) != 0:
            puzzle.set_value(row, col, 0)
            removed += 1

    return puzzle, puzzle.copy()


def generate_puzzle(
    difficulty: str, rng: Optional[random.Random] = None
) -> GeneratedPuzzle:
    """Generate a fresh solution and puzzle for a named difficulty."""
    clue_count = clue_count_for(difficulty)
    start = time.perf_counter()

    solution = generate_solution(rng)
    puzzle, original = derive_puzzle(solution, clue_count, rng)

    _LOGGER.debug(
        "Generated %s puzzle with %d clues in %.1f ms",
        difficulty,
        clue_count,
        (time.perf_counter() - start) * 1000.0,
    )
    return GeneratedPuzzle(
        difficulty=difficulty, solution=solution, puzzle=puzzle, original=original
    )
