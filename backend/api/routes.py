"""API routes for the Sudoku game application."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response

from ..config import Settings, load_settings
from ..errors import (
    GivenCellError,
    HintUnavailableError,
    SessionNotFoundError,
    SudokuError,
)
from ..game.generator import DIFFICULTIES, clue_count_for, validate_clue_count
from ..game.grid import Grid
from ..game.session import GameSession, SessionStore
from ..models.schemas import (
    CellRequest,
    DifficultiesResponse,
    GameState,
    HealthResponse,
    HintResponse,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    NoteEntry,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import SudokuSolver, is_consistent

router = APIRouter()
_SETTINGS: Settings | None = None
_STORE: SessionStore | None = None
_LOGGER = logging.getLogger(__name__)


def _get_settings() -> Settings:
    global _SETTINGS

    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def _get_store() -> SessionStore:
    global _STORE

    if _STORE is None:
        _STORE = SessionStore(_get_settings())
    return _STORE


def _check_game_config() -> str | None:
    """Return a description of the first invalid game setting, if any."""
    try:
        for clue_count in DIFFICULTIES.values():
            validate_clue_count(clue_count)
        clue_count_for(_get_settings().default_difficulty)
    except SudokuError as e:
        return e.args[0] if e.args else str(e)
    return None


def _http_error(exc: SudokuError) -> HTTPException:
    """Translate a game error into an HTTP error response."""
    if isinstance(exc, SessionNotFoundError):
        status_code = 404
    elif isinstance(exc, (GivenCellError, HintUnavailableError)):
        status_code = 409
    else:
        status_code = 400
    # KeyError.__str__ quotes its argument.
    detail = exc.args[0] if exc.args else str(exc)
    _LOGGER.info("Request failed with %d: %s", status_code, detail)
    return HTTPException(status_code=status_code, detail=detail)


def _find_session(game_id: str) -> GameSession:
    try:
        return _get_store().get(game_id)
    except SessionNotFoundError as e:
        raise _http_error(e)


def game_state(session: GameSession) -> GameState:
    """Build the player-visible view of a session."""
    board = session.board.to_list()
    original = session.original.to_list()
    return GameState(
        id=session.id,
        difficulty=session.difficulty,
        board=board,
        given=[[value != 0 for value in row] for row in original],
        score=session.score,
        mistakes=session.mistakes,
        max_mistakes=session.settings.max_mistakes,
        hints_used=session.hints_used,
        hints_remaining=session.hints_remaining,
        notes_mode=session.notes_mode,
        notes=[
            NoteEntry(row=row, col=col, digits=digits)
            for (row, col), digits in sorted(session.notes.items())
        ],
        error_cells=[[row, col] for row, col in sorted(session.error_cells)],
        elapsed_seconds=session.elapsed_seconds,
        timer_started=session.timer_started,
        exhausted_digits=session.exhausted_digits,
        completed=session.completed,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", active_games=len(_get_store()))


@router.get(
    "/api/v1/difficulties", response_model=DifficultiesResponse, tags=["Game"]
)
async def list_difficulties():
    """Clue count for each difficulty level."""
    return DifficultiesResponse(
        difficulties=dict(DIFFICULTIES),
        default=_get_settings().default_difficulty,
    )


@router.post(
    "/api/v1/games", response_model=GameState, status_code=201, tags=["Game"]
)
async def create_game(request: NewGameRequest | None = None):
    """Start a new game session."""
    difficulty = request.difficulty if request else None
    try:
        session = _get_store().create(difficulty)
    except SudokuError as e:
        raise _http_error(e)
    return game_state(session)


@router.get("/api/v1/games/{game_id}", response_model=GameState, tags=["Game"])
async def get_game(game_id: str):
    return game_state(_find_session(game_id))


@router.delete("/api/v1/games/{game_id}", status_code=204, tags=["Game"])
async def delete_game(game_id: str):
    try:
        _get_store().delete(game_id)
    except SessionNotFoundError as e:
        raise _http_error(e)
    return Response(status_code=204)


@router.post(
    "/api/v1/games/{game_id}:move", response_model=MoveResponse, tags=["Game"]
)
async def enter_number(game_id: str, request: MoveRequest):
    """
    Enter a digit into a cell.

    In notes mode the digit is toggled as a pencil mark. Too many mistakes
    end the game and a new puzzle of the same difficulty is started.
    """
    session = _find_session(game_id)
    try:
        outcome = session.enter_number(request.row, request.col, request.value)
    except SudokuError as e:
        raise _http_error(e)

    if outcome.game_over:
        message = "Game over! Too many mistakes. Starting a new game..."
    elif outcome.completed:
        message = f"Congratulations! Your total score: {session.score}"
    elif outcome.result is None:
        message = "Note updated"
    else:
        message = f"Move is {outcome.result.value}"

    return MoveResponse(
        result=outcome.result.value if outcome.result else None,
        completed=outcome.completed,
        game_over=outcome.game_over,
        message=message,
        state=game_state(session),
    )


@router.post(
    "/api/v1/games/{game_id}:erase", response_model=GameState, tags=["Game"]
)
async def erase_cell(game_id: str, request: CellRequest):
    session = _find_session(game_id)
    try:
        session.erase(request.row, request.col)
    except SudokuError as e:
        raise _http_error(e)
    return game_state(session)


@router.post(
    "/api/v1/games/{game_id}:hint", response_model=HintResponse, tags=["Game"]
)
async def give_hint(game_id: str):
    """Reveal the solution value of a random empty cell."""
    session = _find_session(game_id)
    try:
        row, col, value = session.give_hint()
    except SudokuError as e:
        raise _http_error(e)
    return HintResponse(row=row, col=col, value=value, state=game_state(session))


@router.post(
    "/api/v1/games/{game_id}:notes", response_model=GameState, tags=["Game"]
)
async def toggle_notes(game_id: str):
    session = _find_session(game_id)
    session.toggle_notes_mode()
    return game_state(session)


@router.post(
    "/api/v1/games/{game_id}:reset", response_model=GameState, tags=["Game"]
)
async def reset_progress(game_id: str):
    """Clear the player's entries and restore the original clues."""
    session = _find_session(game_id)
    session.reset_progress()
    return game_state(session)


@router.post(
    "/api/v1/games/{game_id}:retry", response_model=GameState, tags=["Game"]
)
async def retry_game(game_id: str):
    """Start a fresh puzzle at the current difficulty."""
    session = _find_session(game_id)
    session.retry()
    return game_state(session)


@router.post(
    "/api/v1/games/{game_id}:newGame", response_model=GameState, tags=["Game"]
)
async def new_game(game_id: str, request: NewGameRequest | None = None):
    session = _find_session(game_id)
    try:
        session.new_game(request.difficulty if request else None)
    except SudokuError as e:
        raise _http_error(e)
    return game_state(session)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    cells = request.grid.cells
    try:
        grid = Grid(cells)
    except SudokuError:
        return SolveResponse(
            success=False,
            original=cells,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    if not is_consistent(grid):
        return SolveResponse(
            success=False,
            original=cells,
            solved=None,
            message="Puzzle has conflicting values",
        )

    solved = SudokuSolver().solve(grid)
    if solved is None:
        return SolveResponse(
            success=False, original=cells, solved=None, message="Puzzle has no solution"
        )

    return SolveResponse(
        success=True,
        original=cells,
        solved=solved.to_list(),
        message="Puzzle solved successfully",
    )
