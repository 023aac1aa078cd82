"""Per-player game state: board, score, mistakes, timer, hints and notes."""

from __future__ import annotations

import logging
import random
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import Settings
from ..errors import (
    GivenCellError,
    HintUnavailableError,
    InvalidValueError,
    SessionNotFoundError,
)
from .generator import generate_puzzle
from .grid import SIZE
from .validator import MoveResult, is_complete, validate_move

_LOGGER = logging.getLogger(__name__)

Cell = tuple[int, int]


@dataclass(frozen=True)
class MoveOutcome:
    """What happened after a number was entered."""

    row: int
    col: int
    value: int
    result: Optional[MoveResult]
    completed: bool = False
    game_over: bool = False


class GameSession:
    """State of one player's game, replaced wholesale on new game or retry."""

    def __init__(
        self,
        difficulty: str,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.id = uuid.uuid4().hex
        self.settings = settings or Settings()
        self._rng = rng
        self._clock = clock
        self.games_started = 0
        self.new_game(difficulty)

    def new_game(self, difficulty: Optional[str] = None) -> None:
        """Generate a new puzzle and clear all progress."""
        generated = generate_puzzle(difficulty or self.difficulty, self._rng)

        self.difficulty = generated.difficulty
        self.solution = generated.solution
        self.board = generated.puzzle
        self.original = generated.original
        self.hints_used = 0
        self.notes_mode = False
        self._clear_progress()
        self.games_started += 1

        _LOGGER.info(
            "Session %s started %s game (%d clues)",
            self.id,
            self.difficulty,
            generated.clue_count,
        )

    def retry(self) -> None:
        self.new_game(self.difficulty)

    def reset_progress(self) -> None:
        """
        Restore the original clues without regenerating the solution.

        A running timer restarts from zero; one not yet started stays idle.
        """
        timer_running = self.timer_started
        self.board = self.original.copy()
        self._clear_progress()
        if timer_running:
            self._timer_started_at = self._clock()
        _LOGGER.info("Session %s reset progress", self.id)

    def _clear_progress(self) -> None:
        self.score = 0
        self.mistakes = 0
        self.notes: dict[Cell, list[int]] = {}
        self.error_cells: set[Cell] = set()
        self._timer_started_at: Optional[float] = None

    def is_given(self, row: int, col: int) -> bool:
        return self.original.value_at(row, col) != 0

    def _require_editable(self, row: int, col: int) -> None:
        if self.is_given(row, col):
            raise GivenCellError(f"Cell ({row}, {col}) is a given clue")

    def enter_number(self, row: int, col: int, value: int) -> MoveOutcome:
        """
        Enter *value* at (row, col).

        In notes mode the value is toggled in the cell's notes instead. A
        wrong value counts as a mistake; exceeding the mistake limit ends the
        game and starts a new one at the same difficulty.
        """
        if not 1 <= value <= SIZE:
            raise InvalidValueError(f"Digit must be in range 1-{SIZE}, got {value}")
        self._require_editable(row, col)

        if self.notes_mode:
            self._toggle_note((row, col), value)
            return MoveOutcome(row=row, col=col, value=value, result=None)

        if self._timer_started_at is None:
            self._timer_started_at = self._clock()

        cell = (row, col)
        self.notes.pop(cell, None)
        self.board.set_value(row, col, value)

        result = validate_move(self.solution, row, col, value)
        if result is MoveResult.INCORRECT:
            self.mistakes += 1
            self.error_cells.add(cell)
            if self.mistakes > self.settings.max_mistakes:
                _LOGGER.info(
                    "Session %s game over after %d mistakes", self.id, self.mistakes
                )
                self.new_game(self.difficulty)
                return MoveOutcome(
                    row=row, col=col, value=value, result=result, game_over=True
                )
        else:
            self.score += self.settings.points_per_correct
            self.error_cells.discard(cell)

        return MoveOutcome(
            row=row, col=col, value=value, result=result, completed=self.completed
        )

    def _toggle_note(self, cell: Cell, value: int) -> None:
        notes = self.notes.get(cell, [])
        if value in notes:
            notes = [n for n in notes if n != value]
        else:
            notes = sorted(notes + [value])

        if notes:
            self.notes[cell] = notes
        else:
            self.notes.pop(cell, None)

    def erase(self, row: int, col: int) -> None:
        self._require_editable(row, col)
        self.board.set_value(row, col, 0)
        self.error_cells.discard((row, col))

    def toggle_notes_mode(self) -> bool:
        self.notes_mode = not self.notes_mode
        return self.notes_mode

    def give_hint(self) -> tuple[int, int, int]:
        """Fill a random empty cell with its solution value."""
        if self.hints_used >= self.settings.max_hints:
            raise HintUnavailableError(
                f"All {self.settings.max_hints} hints have been used"
            )

        empty = self.board.empty_cells()
        if not empty:
            raise HintUnavailableError("No empty cells left")

        rng = self._rng if self._rng is not None else random
        row, col = rng.choice(empty)
        value = self.solution.value_at(row, col)

        self.board.set_value(row, col, value)
        self.notes.pop((row, col), None)
        self.hints_used += 1
        self.score += self.settings.points_per_hint
        return row, col, value

    @property
    def hints_remaining(self) -> int:
        return max(0, self.settings.max_hints - self.hints_used)

    @property
    def completed(self) -> bool:
        return is_complete(self.board, self.solution)

    @property
    def timer_started(self) -> bool:
        return self._timer_started_at is not None

    @property
    def elapsed_seconds(self) -> int:
        if self._timer_started_at is None:
            return 0
        return int(self._clock() - self._timer_started_at)

    @property
    def exhausted_digits(self) -> list[int]:
        """Digits already placed nine times on the board."""
        return [d for d, n in self.board.digit_counts().items() if n >= SIZE]


class SessionStore:
    """In-memory sessions keyed by id, oldest evicted first."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()

    def create(
        self, difficulty: Optional[str] = None, rng: Optional[random.Random] = None
    ) -> GameSession:
        session = GameSession(
            difficulty or self.settings.default_difficulty,
            rng=rng,
            settings=self.settings,
        )
        self._sessions[session.id] = session

        while len(self._sessions) > self.settings.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            _LOGGER.info("Evicted session %s", evicted)

        return session

    def get(self, session_id: str) -> GameSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Game '{session_id}' not found") from None

    def delete(self, session_id: str) -> None:
        self.get(session_id)
        del self._sessions[session_id]

    def __len__(self) -> int:
        return len(self._sessions)
