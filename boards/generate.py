from __future__ import annotations

from typing import Optional

import numpy as np

from engine.board import Board
from engine.errors import AllocationError


def random_cells(rows: int, cols: int, *, seed: Optional[int] = None) -> np.ndarray:
    """Return a (rows, cols) bool array of independent fair coin flips."""
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    rng = np.random.default_rng(seed)
    try:
        return rng.integers(0, 2, size=(rows, cols), dtype=np.uint8).astype(bool)
    except (MemoryError, ValueError, OverflowError) as exc:
        raise AllocationError(f"could not allocate a {rows}x{cols} board") from exc


def random_board(rows: int, cols: int, *, seed: Optional[int] = None) -> Board:
    return Board(random_cells(rows, cols, seed=seed))
