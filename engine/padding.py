from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .board import Board
from .errors import AllocationError


def padded_shape(board: Board) -> Tuple[int, int]:
    return board.rows + 2, board.cols + 2


def build_padded(board: Board, out: Optional[np.ndarray] = None) -> np.ndarray:
    """Copy ``board`` into a grid with a one-cell toroidal border.

    Args:
        board: Board of shape (H, W).
        out: optional bool array of shape (H+2, W+2) to overwrite.

    Returns:
        Array of shape (H+2, W+2) where the interior is the board, each border
        row/column repeats the opposite edge and each corner repeats the
        diagonally opposite corner cell.
    """
    H, W = board.shape
    if out is None:
        try:
            out = np.empty((H + 2, W + 2), dtype=bool)
        except (MemoryError, ValueError, OverflowError) as exc:
            raise AllocationError(f"could not allocate a padded {H + 2}x{W + 2} board") from exc
    elif out.shape != (H + 2, W + 2):
        raise ValueError(f"padded buffer must have shape {(H + 2, W + 2)}, got {out.shape}")
    b = board.cells

    out[1:H+1, 1:W+1] = b
    # Edges: each border takes the opposite edge of the board.
    out[0, 1:W+1] = b[H-1, :]
    out[H+1, 1:W+1] = b[0, :]
    out[1:H+1, 0] = b[:, W-1]
    out[1:H+1, W+1] = b[:, 0]
    # Corners: the diagonally opposite corner of the board.
    out[0, 0] = b[H-1, W-1]
    out[H+1, W+1] = b[0, 0]
    out[0, W+1] = b[H-1, 0]
    out[H+1, 0] = b[0, W-1]
    return out


class PaddingBuffer:
    """Scratch padded grid reused from one generation to the next.

    The array is only reallocated when the board shape changes.
    """

    def __init__(self):
        self._buf: Optional[np.ndarray] = None

    @property
    def array(self) -> Optional[np.ndarray]:
        return self._buf

    def fill(self, board: Board) -> np.ndarray:
        """Refresh the buffer from ``board`` and return it."""
        if self._buf is None or self._buf.shape != padded_shape(board):
            self._buf = build_padded(board)
        else:
            build_padded(board, out=self._buf)
        return self._buf
