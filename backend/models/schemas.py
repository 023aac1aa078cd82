"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CellRequest(BaseModel):
    """Address of a single Sudoku cell."""

    row: int = Field(ge=0, le=8, description="Row index (0-8)")
    col: int = Field(ge=0, le=8, description="Column index (0-8)")


class MoveRequest(CellRequest):
    """A digit entered by the player."""

    value: int = Field(ge=1, le=9, description="Digit to enter (1-9)")


class NewGameRequest(BaseModel):
    """Request to start a game."""

    difficulty: str | None = Field(
        default=None, description="Difficulty name (defaults to the configured one)"
    )


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cells": [
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
            }
        }
    )

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")


class NoteEntry(BaseModel):
    """Pencil marks for one empty cell."""

    row: int
    col: int
    digits: list[int]


class GameState(BaseModel):
    """Player-visible state of a game session. Never includes the solution."""

    id: str = Field(description="Session id")
    difficulty: str
    board: list[list[int]] = Field(description="Current board (0 for empty)")
    given: list[list[bool]] = Field(description="True where the cell is a clue")
    score: int
    mistakes: int
    max_mistakes: int
    hints_used: int
    hints_remaining: int
    notes_mode: bool
    notes: list[NoteEntry]
    error_cells: list[list[int]] = Field(description="[row, col] of wrong entries")
    elapsed_seconds: int
    timer_started: bool
    exhausted_digits: list[int] = Field(description="Digits placed nine times")
    completed: bool


class MoveResponse(BaseModel):
    """Result of entering a number."""

    result: str | None = Field(
        description="'correct' or 'incorrect'; null when a note was toggled"
    )
    completed: bool
    game_over: bool
    message: str
    state: GameState


class HintResponse(BaseModel):
    """Cell filled in by a hint."""

    row: int
    col: int
    value: int
    state: GameState


class DifficultiesResponse(BaseModel):
    """Configured clue count per difficulty."""

    difficulties: dict[str, int]
    default: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    active_games: int = Field(description="Number of sessions held in memory")
