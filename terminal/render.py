from __future__ import annotations

from typing import TextIO

from engine.board import Board

# Move the cursor home, then clear the screen.
CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
ALIVE_GLYPH = "o"
DEAD_GLYPH = " "


def render(board: Board) -> str:
    """Return the board as text, one line of glyphs per row."""
    return "".join(
        "".join(ALIVE_GLYPH if c else DEAD_GLYPH for c in row) + "\n"
        for row in board.cells.tolist()
    )


def draw(board: Board, stream: TextIO) -> None:
    stream.write(CLEAR_SCREEN + render(board))
    stream.flush()
