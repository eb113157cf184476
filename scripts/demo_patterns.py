import os
import sys

# Ensure repository root is on path when run as a script
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from boards.rle import parse_rle
from engine import Board, Stepper
from terminal.render import render

GLIDER_RLE = """\
#N Glider
x = 3, y = 3, rule = B3/S23
bob$2bo$3o!
"""


def show(name, board, generations=4):
    stepper = Stepper()
    for gen in range(generations + 1):
        print(f"{name}: generation {gen}, population {board.population()}")
        print(render(board).replace(" ", "."))
        stepper.advance(board)


def demo_blinker():
    board = Board.dead(5, 5)
    for col in range(1, 4):
        board[2, col] = True
    show("Blinker", board, generations=2)


def demo_glider():
    board, _ = parse_rle(GLIDER_RLE)
    show("Glider", board, generations=4)


if __name__ == "__main__":
    demo_blinker()
    demo_glider()
