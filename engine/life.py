from __future__ import annotations

import logging

import numpy as np

from .board import Board
from .padding import PaddingBuffer, build_padded
from .rules import CONWAY, Rule

log = logging.getLogger(__name__)


# (row, col) offsets of the eight cells around a cell.
NEIGHBOUR_OFFSETS = tuple((di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0))


def neighbor_counts(padded: np.ndarray) -> np.ndarray:
    """Count live neighbours of every board cell.

    ``padded`` is the board wrapped in its toroidal border (see
    ``build_padded``), so each offset is a plain shifted window over it. The
    result has the board's shape and values in 0..8.
    """
    if padded.ndim != 2 or padded.shape[0] < 3 or padded.shape[1] < 3:
        raise ValueError("padded board must be 2D and at least 3x3")
    rows, cols = padded.shape[0] - 2, padded.shape[1] - 2
    counts = np.zeros((rows, cols), dtype=np.int16)
    for di, dj in NEIGHBOUR_OFFSETS:
        counts += padded[1 + di:1 + di + rows, 1 + dj:1 + dj + cols]
    return counts


def _apply(live: np.ndarray, counts: np.ndarray, rule: Rule) -> np.ndarray:
    born = (~live) & np.isin(counts, sorted(rule.born))
    survive = live & np.isin(counts, sorted(rule.survive))
    return born | survive


def step(board: Board, padded: np.ndarray, rule: Rule = CONWAY) -> Board:
    """Advance ``board`` one generation in place.

    ``padded`` must be built from the board as it was before this call; every
    neighbour count is read from it, never from the cells being rewritten.
    Returns the same board.
    """
    if padded.shape != (board.rows + 2, board.cols + 2):
        raise ValueError(f"padded board must have shape {(board.rows + 2, board.cols + 2)}, got {padded.shape}")
    counts = neighbor_counts(padded)
    board.cells[...] = _apply(board.cells, counts, rule)
    return board


def life_step(cells: np.ndarray, rule: Rule = CONWAY) -> np.ndarray:
    """Pure toroidal step on a raw 2D array; returns a new bool array.

    Args:
        cells: 2D array (H, W) in {0,1}, at least 2x2.
        rule: Life-like rule, Conway's B3/S23 by default.
    """
    board = Board(cells)
    return step(board, build_padded(board), rule).cells.copy()


class Stepper:
    """Advances a board generation by generation with a reused padded buffer."""

    def __init__(self, rule: Rule = CONWAY):
        self.rule = rule
        self.generation = 0
        self._padding = PaddingBuffer()

    def advance(self, board: Board) -> Board:
        padded = self._padding.fill(board)
        step(board, padded, self.rule)
        self.generation += 1
        if log.isEnabledFor(logging.DEBUG):
            log.debug("generation %d: population %d", self.generation, board.population())
        return board
