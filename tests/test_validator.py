"""Tests for move validation against a solution."""

from backend.game.validator import MoveResult, is_complete, validate_move


def test_validate_move(solution_grid):
    assert validate_move(solution_grid, 0, 2, 4) is MoveResult.CORRECT
    assert validate_move(solution_grid, 0, 2, 9) is MoveResult.INCORRECT
    assert validate_move(solution_grid, 8, 8, 9) is MoveResult.CORRECT


def test_validate_move_is_pure(solution_grid):
    before = solution_grid.copy()
    validate_move(solution_grid, 4, 4, 1)

    assert solution_grid == before


def test_move_result_values():
    assert MoveResult.CORRECT.value == "correct"
    assert MoveResult.INCORRECT == "incorrect"


def test_is_complete(puzzle_grid, solution_grid):
    assert not is_complete(puzzle_grid, solution_grid)
    assert is_complete(solution_grid.copy(), solution_grid)

    wrong = solution_grid.copy()
    wrong.set_value(0, 0, 3)
    assert not is_complete(wrong, solution_grid)


def test_every_cell_correct_iff_complete(puzzle_grid, solution_grid):
    def all_correct(grid):
        return all(
            validate_move(solution_grid, r, c, grid.value_at(r, c)) is MoveResult.CORRECT
            for r in range(9)
            for c in range(9)
        )

    assert all_correct(solution_grid) is is_complete(solution_grid, solution_grid)
    assert all_correct(puzzle_grid) is is_complete(puzzle_grid, solution_grid)
