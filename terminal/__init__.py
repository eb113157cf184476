from .config import Config, config_from_mapping, load_config
from .driver import initial_board, run, run_config
from .render import ALIVE_GLYPH, CLEAR_SCREEN, DEAD_GLYPH, draw, render

__all__ = [
    "Config",
    "config_from_mapping",
    "load_config",
    "initial_board",
    "run",
    "run_config",
    "ALIVE_GLYPH",
    "CLEAR_SCREEN",
    "DEAD_GLYPH",
    "draw",
    "render",
]
