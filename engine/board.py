from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import AllocationError, FormatError

MIN_SIDE = 2


def _allocate(shape: Tuple[int, int]) -> np.ndarray:
    try:
        return np.zeros(shape, dtype=bool)
    except (MemoryError, ValueError, OverflowError) as exc:
        raise AllocationError(f"could not allocate a {shape[0]}x{shape[1]} board") from exc


class Board:
    """Fixed-size grid of live/dead cells.

    Cells live in a row-major ``(rows, cols)`` boolean array, so the cell at
    ``(row, col)`` sits at position ``row * cols + col`` of :meth:`flat`.
    The array is updated in place each generation; its shape never changes.
    """

    def __init__(self, cells: np.ndarray):
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise FormatError("board must be 2D")
        rows, cols = cells.shape
        if rows < MIN_SIDE or cols < MIN_SIDE:
            raise FormatError(f"board must be at least {MIN_SIDE}x{MIN_SIDE}, got {rows}x{cols}")
        self._cells = _allocate(cells.shape)
        self._cells[...] = cells != 0

    @classmethod
    def dead(cls, rows: int, cols: int) -> "Board":
        """Return an all-dead board."""
        if rows < MIN_SIDE or cols < MIN_SIDE:
            raise FormatError(f"board must be at least {MIN_SIDE}x{MIN_SIDE}, got {rows}x{cols}")
        return cls(_allocate((rows, cols)))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Board":
        """Build a board from nested 0/1 rows, e.g. ``[[0, 1], [1, 1]]``."""
        grid = [list(r) for r in rows]
        if not grid or len({len(r) for r in grid}) != 1:
            raise FormatError("rows must be non-empty and of equal length")
        return cls(np.array(grid, dtype=np.uint8))

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """The live cell array (a view, writes go to the board)."""
        return self._cells

    def flat_index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} board")
        return row * self.cols + col

    def flat(self) -> np.ndarray:
        """Row-major 1D view of the cells."""
        return self._cells.reshape(-1)

    def population(self) -> int:
        return int(np.count_nonzero(self._cells))

    def copy(self) -> "Board":
        return Board(self._cells.copy())

    def to_text(self) -> str:
        """Dense ``0``/``1`` text, one line per row."""
        return "".join("".join("1" if c else "0" for c in row) + "\n" for row in self._cells.tolist())

    def __getitem__(self, pos: Tuple[int, int]) -> bool:
        row, col = pos
        return bool(self._cells.reshape(-1)[self.flat_index(row, col)])

    def __setitem__(self, pos: Tuple[int, int], alive: bool) -> None:
        row, col = pos
        self._cells.reshape(-1)[self.flat_index(row, col)] = bool(alive)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, population={self.population()})"
