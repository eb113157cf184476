from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import colorlog

from engine.errors import FormatError, LifeError, UsageError
from engine.rules import parse_rule

from .config import DEFAULT_INTERVAL_MS, DEFAULT_LOG_LEVEL, Config
from .driver import run_config

log = logging.getLogger(__name__)

EPILOG = """\
notes:
  the default -time is 200 (the board updates every 200 milliseconds)
  the default -gen is 0, which runs until interrupted (CTRL+C)
  files ending in .rle are read as run-length encoded patterns
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="life",
        description="Conway's Game of Life on a wrap-around board, drawn in the terminal.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("-random", nargs=2, type=int, metavar=("ROWS", "COLS"), help="start from a random ROWS x COLS board")
    source.add_argument("-input", type=Path, metavar="PATH", help="start from a dense 0/1 or .rle board file")
    ap.add_argument("-time", type=int, default=DEFAULT_INTERVAL_MS, metavar="MILLIS", help="milliseconds between generations")
    ap.add_argument("-gen", type=int, default=0, metavar="COUNT", help="number of generations to run, 0 for no limit")
    ap.add_argument("-seed", type=int, default=None, help="seed for -random boards")
    ap.add_argument("-rule", type=str, default=None, help="B/S rule such as B3/S23 (default: Conway)")
    ap.add_argument("-log-level", type=str, default=DEFAULT_LOG_LEVEL, metavar="LEVEL", help="logging level written to stderr")
    return ap


def parse_config(ap: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> Config:
    args = ap.parse_args(argv)
    rule = None
    if args.rule is not None:
        try:
            rule = parse_rule(args.rule)
        except FormatError as exc:
            raise UsageError(exc.msg) from None
    return Config(
        random_size=tuple(args.random) if args.random is not None else None,
        input_path=args.input,
        interval_ms=args.time,
        generations=args.gen,
        seed=args.seed,
        rule=rule,
        log_level=args.log_level,
    ).validate()


def setup_logging(level: str) -> None:
    colorlog.basicConfig(
        format="%(log_color)s[%(levelname)-8s] %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "bold",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        level=level.upper(),
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    try:
        config = parse_config(ap, argv)
    except UsageError as exc:
        ap.print_usage(sys.stderr)
        print(f"{ap.prog}: error: {exc}", file=sys.stderr)
        return 1
    setup_logging(config.log_level)
    try:
        run_config(config)
    except LifeError as exc:
        log.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
