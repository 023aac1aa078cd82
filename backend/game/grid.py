"""9x9 Sudoku grid backed by a numpy array."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from ..errors import InvalidGridError, InvalidIndexError, InvalidValueError

SIZE = 9
BOX = 3


def _check_index(name: str, index: int) -> None:
    if not 0 <= index < SIZE:
        raise InvalidIndexError(f"{name} index {index} out of range 0-{SIZE - 1}")


def _check_value(value: int) -> None:
    if not 0 <= value <= SIZE:
        raise InvalidValueError(f"Cell value {value} out of range 0-{SIZE}")


class Grid:
    """A 9x9 table of digits where 0 marks an empty cell."""

    def __init__(self, cells: Optional[Iterable[Sequence[int]]] = None):
        if cells is None:
            self._cells = np.zeros((SIZE, SIZE), dtype=np.int8)
            return

        try:
            arr = np.array([list(row) for row in cells], dtype=np.int64)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidGridError(f"Grid must be a 9x9 table of integers: {exc}") from exc

        if arr.shape != (SIZE, SIZE):
            raise InvalidGridError(f"Grid must be 9x9, got shape {arr.shape}")
        if arr.min() < 0 or arr.max() > SIZE:
            raise InvalidGridError("Grid values must be in range 0-9")

        self._cells = arr.astype(np.int8)

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    def value_at(self, row: int, col: int) -> int:
        _check_index("row", row)
        _check_index("col", col)
        return int(self._cells[row, col])

    def set_value(self, row: int, col: int, value: int) -> None:
        """Place *value* at (row, col); 0 clears the cell."""
        _check_index("row", row)
        _check_index("col", col)
        _check_value(value)
        self._cells[row, col] = value

    def row_values(self, row: int) -> list[int]:
        _check_index("row", row)
        return self._cells[row, :].tolist()

    def column_values(self, col: int) -> list[int]:
        _check_index("col", col)
        return self._cells[:, col].tolist()

    def box_values(self, row: int, col: int) -> list[int]:
        """Values of the 3x3 box containing (row, col), read row by row."""
        _check_index("row", row)
        _check_index("col", col)
        box_row = (row // BOX) * BOX
        box_col = (col // BOX) * BOX
        return self._cells[box_row:box_row + BOX, box_col:box_col + BOX].ravel().tolist()

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = self._cells.copy()
        return clone

    def to_list(self) -> list[list[int]]:
        return self._cells.tolist()

    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def empty_cells(self) -> list[tuple[int, int]]:
        """Coordinates of all empty cells in row-major order."""
        rows, cols = np.nonzero(self._cells == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def digit_counts(self) -> dict[int, int]:
        counts = np.bincount(self._cells.ravel(), minlength=SIZE + 1)
        return {digit: int(counts[digit]) for digit in range(1, SIZE + 1)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid({self.to_list()!r})"
