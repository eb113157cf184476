from __future__ import annotations

import itertools
import logging
import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from boards.generate import random_board
from boards.loader import load_board
from engine.board import Board
from engine.life import Stepper
from engine.rules import CONWAY, Rule

from .config import DEFAULT_INTERVAL_MS, Config
from .render import draw

log = logging.getLogger(__name__)


def initial_board(config: Config) -> Tuple[Board, Rule]:
    """Create the starting board and choose the rule to run it with.

    The rule is ``config.rule`` when given, otherwise Conway's. A rule named
    in an RLE header is only reported, never applied.
    """
    file_rule = None
    if config.random_size is not None:
        rows, cols = config.random_size
        board = random_board(rows, cols, seed=config.seed)
        log.info("Generated random %dx%d board (seed=%s)", rows, cols, config.seed)
    else:
        board, file_rule = load_board(config.input_path)
        log.info("Loaded %dx%d board from %s", board.rows, board.cols, config.input_path)
    rule = config.rule or CONWAY
    if file_rule is not None and file_rule != rule:
        log.info("Ignoring rule %s named in %s; running %s", file_rule, config.input_path, rule)
    return board, rule


def run(
    board: Board,
    *,
    generations: int = 0,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    rule: Rule = CONWAY,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Draw ``board`` and advance it until the generation bound is reached.

    With ``generations == N > 0`` exactly N+1 frames are drawn: the initial
    state and N further generations. ``generations == 0`` never returns.
    Returns the number of frames drawn.
    """
    if generations < 0:
        raise ValueError("generations must not be negative")
    out = stream if stream is not None else sys.stdout
    stepper = Stepper(rule)
    frames = itertools.count() if generations == 0 else range(generations + 1)
    drawn = 0
    log.debug("Running %s with rule %s", "forever" if generations == 0 else f"{generations} generations", rule)
    for _ in frames:
        draw(board, out)
        drawn += 1
        stepper.advance(board)
        sleep(interval_ms / 1000.0)
    return drawn


def run_config(config: Config, *, stream: Optional[TextIO] = None, sleep: Callable[[float], None] = time.sleep) -> int:
    board, rule = initial_board(config)
    return run(
        board,
        generations=config.generations,
        interval_ms=config.interval_ms,
        rule=rule,
        stream=stream,
        sleep=sleep,
    )
