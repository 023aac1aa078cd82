"""Exceptions raised by the Sudoku game core and session layer."""


class SudokuError(Exception):
    """Base class for game errors."""


class InvalidIndexError(SudokuError, IndexError):
    """Row or column outside 0-8."""


class InvalidValueError(SudokuError, ValueError):
    """Cell value outside the allowed digit range."""


class InvalidGridError(SudokuError, ValueError):
    """Grid data is not a 9x9 table of digits 0-9."""


class InvalidClueCountError(SudokuError, ValueError):
    """Clue count outside 0-81."""


class UnknownDifficultyError(SudokuError, ValueError):
    """Difficulty name not present in the difficulty table."""


class GivenCellError(SudokuError):
    """Attempt to modify one of the puzzle's given clues."""


class HintUnavailableError(SudokuError):
    """No hint can be given (limit reached or board already full)."""


class SessionNotFoundError(SudokuError, KeyError):
    """No game session with the requested id."""
