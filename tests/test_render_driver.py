import io
import logging

import numpy as np
import pytest

from engine import CONWAY, Board, parse_rule
from terminal.config import Config
from terminal.driver import initial_board, run, run_config
from terminal.render import CLEAR_SCREEN, draw, render


class _Stop(Exception):
    pass


def _blinker():
    x = np.zeros((5, 5), dtype=np.uint8)
    x[2, 1:4] = 1
    return Board(x)


def test_render_glyphs():
    b = Board.from_rows([[1, 0, 1], [0, 1, 0]])
    assert render(b) == "o o\n o \n"


def test_draw_clears_screen_first():
    out = io.StringIO()
    draw(Board.dead(2, 2), out)
    assert out.getvalue() == CLEAR_SCREEN + "  \n  \n"


def test_run_draws_generations_plus_one_frames():
    out = io.StringIO()
    sleeps = []
    drawn = run(_blinker(), generations=3, interval_ms=150, stream=out, sleep=sleeps.append)
    assert drawn == 4
    assert out.getvalue().count(CLEAR_SCREEN) == 4
    assert sleeps == [0.15] * 4


def test_run_frames_follow_generations():
    out = io.StringIO()
    run(_blinker(), generations=1, interval_ms=0, stream=out, sleep=lambda s: None)
    frames = out.getvalue().split(CLEAR_SCREEN)[1:]
    assert frames[0] == "     \n     \n ooo \n     \n     \n"
    assert frames[1] == "     \n  o  \n  o  \n  o  \n     \n"


def test_run_unbounded_until_interrupted():
    calls = []

    def sleep(s):
        calls.append(s)
        if len(calls) == 5:
            raise _Stop()

    out = io.StringIO()
    with pytest.raises(_Stop):
        run(_blinker(), generations=0, stream=out, sleep=sleep)
    assert out.getvalue().count(CLEAR_SCREEN) == 5
    assert calls[0] == 0.2


def test_run_rejects_negative_generations():
    with pytest.raises(ValueError):
        run(_blinker(), generations=-1, sleep=lambda s: None)


def test_initial_board_random_seeded():
    cfg = Config(random_size=(4, 6), seed=3).validate()
    b1, rule = initial_board(cfg)
    b2, _ = initial_board(cfg)
    assert b1.shape == (4, 6)
    assert b1 == b2
    assert rule == CONWAY


def test_initial_board_ignores_file_rule(tmp_path, caplog):
    p = tmp_path / "pat.rle"
    p.write_text("x = 2, y = 2, rule = B36/S23\n2o$2o!\n")
    with caplog.at_level(logging.INFO, logger="terminal.driver"):
        _, rule = initial_board(Config(input_path=p).validate())
    assert rule == CONWAY
    assert "Ignoring rule B36/S23" in caplog.text
    _, rule = initial_board(Config(input_path=p, rule=parse_rule("B36/S23")).validate())
    assert str(rule) == "B36/S23"


def test_run_config_from_dense_file(tmp_path):
    p = tmp_path / "block.txt"
    p.write_text("0000\n0110\n0110\n0000\n")
    out = io.StringIO()
    drawn = run_config(Config(input_path=p, generations=2, interval_ms=0).validate(), stream=out, sleep=lambda s: None)
    assert drawn == 3
    frames = out.getvalue().split(CLEAR_SCREEN)[1:]
    assert frames == ["    \n oo \n oo \n    \n"] * 3
