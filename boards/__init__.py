from .dense import load_dense, parse_dense
from .generate import random_board, random_cells
from .loader import is_rle, load_board
from .rle import load_rle, parse_rle

__all__ = [
    "load_dense",
    "parse_dense",
    "random_board",
    "random_cells",
    "is_rle",
    "load_board",
    "load_rle",
    "parse_rle",
]
