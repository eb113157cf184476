from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from engine.board import Board
from engine.rules import Rule

from .dense import load_dense
from .rle import load_rle

RLE_SUFFIXES = (".rle",)


def is_rle(path: Path) -> bool:
    return Path(path).suffix.lower() in RLE_SUFFIXES


def load_board(path: Path) -> Tuple[Board, Optional[Rule]]:
    """Load a board file, picking the format from its suffix.

    Returns the board and the rule named in the file (RLE headers only).
    """
    if is_rle(path):
        return load_rle(path)
    return load_dense(path), None
