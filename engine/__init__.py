from .board import Board
from .errors import AllocationError, FormatError, IoError, LifeError, UsageError
from .life import Stepper, life_step, neighbor_counts, step
from .padding import PaddingBuffer, build_padded
from .rules import CONWAY, Rule, next_state, parse_rule

__all__ = [
    "Board",
    "LifeError",
    "UsageError",
    "IoError",
    "FormatError",
    "AllocationError",
    "Stepper",
    "step",
    "life_step",
    "neighbor_counts",
    "PaddingBuffer",
    "build_padded",
    "CONWAY",
    "Rule",
    "next_state",
    "parse_rule",
]
