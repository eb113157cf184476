"""Run-length encoded pattern files.

A file holds optional ``#`` comment lines, a header ``x = COLS, y = ROWS``
(optionally followed by ``, rule = B3/S23``) and a body of tokens:

  ``<n>o``  n live cells
  ``<n>b``  n dead cells
  ``<n>$``  move to the start of the row n rows down
  ``!``     end of pattern

An omitted ``<n>`` means 1. The pattern is placed inside a one-cell dead
margin, so the board is ``(ROWS+2) x (COLS+2)``.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Tuple

from engine.board import Board
from engine.errors import FormatError
from engine.rules import Rule, parse_rule

from ._io import read_text

log = logging.getLogger(__name__)

MARGIN = 1

_FIELD = re.compile(r"\s*([A-Za-z]+)\s*=\s*(\S.*?)\s*")
_TOKEN = re.compile(r"(\d*)(\D)")


def parse_header(line: str) -> Tuple[int, int, Optional[Rule]]:
    """Parse ``x = COLS, y = ROWS[, rule = ...]`` into (cols, rows, rule)."""
    fields: Dict[str, str] = {}
    for part in line.split(","):
        m = _FIELD.fullmatch(part)
        if not m:
            raise FormatError(f"invalid RLE header {line.strip()!r}")
        fields[m.group(1).lower()] = m.group(2)
    try:
        cols = int(fields["x"])
        rows = int(fields["y"])
    except (KeyError, ValueError):
        raise FormatError(f"RLE header must give integer x and y: {line.strip()!r}") from None
    if cols < 0 or rows < 0:
        raise FormatError("RLE dimensions must not be negative")
    rule = None
    if "rule" in fields:
        try:
            rule = parse_rule(fields["rule"])
        except FormatError:
            log.warning("Ignoring unsupported RLE rule %r", fields["rule"])
    return cols, rows, rule


def _split(text: str) -> Tuple[str, str]:
    lines = text.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        return line, "\n".join(lines[i + 1:])
    raise FormatError("RLE file has no 'x = ..., y = ...' header")


def parse_rle(text: str) -> Tuple[Board, Optional[Rule]]:
    """Decode RLE text into a margin-padded board and the header rule, if any."""
    header, body = _split(text)
    cols, rows, rule = parse_header(header)
    board = Board.dead(rows + 2 * MARGIN, cols + 2 * MARGIN)
    cells = board.cells
    row = col = 0
    for m in _TOKEN.finditer(re.sub(r"\s+", "", body)):
        count = int(m.group(1)) if m.group(1) else 1
        tag = m.group(2)
        if tag == "!":
            break
        if count == 0:
            raise FormatError(f"zero run length before {tag!r}")
        if tag == "$":
            row += count
            col = 0
        elif tag in "ob":
            if row >= rows or col + count > cols:
                raise FormatError(f"run {m.group(0)!r} at row {row}, column {col} falls outside the {cols}x{rows} pattern")
            if tag == "o":
                cells[row + MARGIN, col + MARGIN:col + MARGIN + count] = True
            col += count
        else:
            raise FormatError(f"unknown RLE tag {tag!r}")
    log.info("Loaded %dx%d RLE pattern onto a %dx%d board", cols, rows, board.cols, board.rows)
    return board, rule


def load_rle(path: Path) -> Tuple[Board, Optional[Rule]]:
    return parse_rle(read_text(path))
