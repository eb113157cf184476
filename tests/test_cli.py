import pytest

import terminal.cli
from terminal.cli import build_parser, main, parse_config
from terminal.render import CLEAR_SCREEN


@pytest.fixture
def no_run(monkeypatch):
    calls = []
    monkeypatch.setattr(terminal.cli, "run_config", lambda cfg: calls.append(cfg))
    return calls


def test_parse_config_random():
    cfg = parse_config(build_parser(), ["-random", "10", "20", "-time", "50", "-gen", "3", "-seed", "4"])
    assert cfg.random_size == (10, 20)
    assert cfg.input_path is None
    assert cfg.interval_ms == 50
    assert cfg.generations == 3
    assert cfg.seed == 4


def test_parse_config_defaults(tmp_path):
    cfg = parse_config(build_parser(), ["-input", str(tmp_path / "b.txt")])
    assert cfg.interval_ms == 200
    assert cfg.generations == 0
    assert cfg.rule is None


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["-random", "3", "3", "-input", "board.txt"],
        ["-time", "100"],
        ["-random", "3"],
        ["-random", "a", "b"],
        ["-random", "1", "5"],
        ["-random", "3", "3", "-gen", "-1"],
        ["-random", "3", "3", "-rule", "nonsense"],
        ["-random", "3", "3", "-time", str(10**30)],
        ["-random", "3", "3", "-bogus"],
    ],
)
def test_usage_errors(argv, capsys, no_run):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert "usage:" in captured.err
    assert "error:" in captured.err
    assert captured.out == ""
    assert no_run == []


def test_runs_dense_board(tmp_path, capsys):
    p = tmp_path / "board.txt"
    p.write_text("110\n001\n010\n")
    assert main(["-input", str(p), "-gen", "2", "-time", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count(CLEAR_SCREEN) == 3
    assert out.startswith(CLEAR_SCREEN + "oo \n  o\n o \n")


def test_runs_random_board(capsys):
    assert main(["-random", "3", "4", "-gen", "1", "-time", "0", "-seed", "1"]) == 0
    frames = capsys.readouterr().out.split(CLEAR_SCREEN)[1:]
    assert len(frames) == 2
    assert all(len(line) == 4 for line in frames[0].splitlines())


def test_missing_input_file(tmp_path, caplog):
    assert main(["-input", str(tmp_path / "nope.txt"), "-gen", "1"]) == 1
    assert "could not open" in caplog.text


def test_bad_input_format(tmp_path, caplog):
    p = tmp_path / "tiny.txt"
    p.write_text("1\n")
    assert main(["-input", str(p), "-gen", "1"]) == 1
    assert "at least 2x2" in caplog.text


def test_rle_header_rule_does_not_change_conway(tmp_path, capsys):
    p = tmp_path / "ring.rle"
    p.write_text("x = 3, y = 3, rule = B36/S23\n3o$obo$bob!\n")
    assert main(["-input", str(p), "-gen", "1", "-time", "0"]) == 0
    frames = capsys.readouterr().out.split(CLEAR_SCREEN)[1:]
    # The centre has six live neighbours: born under B36, stays dead under Conway
    assert frames[1] == "  o  \n o o \n o o \n  o  \n     \n"


def test_oversized_rle_header(tmp_path, caplog):
    p = tmp_path / "huge.rle"
    p.write_text("x = 99999999999999999999, y = 3\no!\n")
    assert main(["-input", str(p), "-gen", "1", "-time", "0"]) == 1
    assert "could not allocate" in caplog.text


def test_oversized_random_board(caplog):
    assert main(["-random", "99999999999999999999", "3", "-gen", "1", "-time", "0"]) == 1
    assert "could not allocate" in caplog.text


def test_interrupt_exits_cleanly(monkeypatch):
    def interrupted(cfg):
        raise KeyboardInterrupt

    monkeypatch.setattr(terminal.cli, "run_config", interrupted)
    assert main(["-random", "3", "3"]) == 0
