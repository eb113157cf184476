"""Dense ``0``/``1`` text boards, one row per line."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import numpy as np

from engine.board import MIN_SIDE, Board
from engine.errors import FormatError

from ._io import read_text

log = logging.getLogger(__name__)


def infer_shape(text: str) -> Tuple[int, int]:
    """Return (rows, cols) for dense board text.

    Rows are the line breaks, plus one for a trailing unterminated line.
    Columns are the length of the first terminated line.
    """
    *terminated, tail = text.split("\n")
    rows = len(terminated) + (1 if tail else 0)
    cols = len(terminated[0]) if terminated else 0
    return rows, cols


def parse_dense(text: str) -> Board:
    rows, cols = infer_shape(text)
    if rows < MIN_SIDE or cols < MIN_SIDE:
        raise FormatError(f"input board must be at least {MIN_SIDE}x{MIN_SIDE}, got {rows}x{cols}")
    digits = [c == "1" for c in text if c in "01"]
    size = rows * cols
    if len(digits) > size:
        log.warning("Ignoring %d cells beyond the %dx%d board", len(digits) - size, rows, cols)
        digits = digits[:size]
    cells = np.zeros(size, dtype=bool)
    cells[: len(digits)] = digits
    log.info("Loaded %dx%d dense board", rows, cols)
    return Board(cells.reshape(rows, cols))


def load_dense(path: Path) -> Board:
    return parse_dense(read_text(path))
