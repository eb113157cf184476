from __future__ import annotations

import argparse
import os
import sys

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.errors import LifeError
from terminal.cli import setup_logging
from terminal.config import load_config
from terminal.driver import run_config


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run a simulation described by a YAML file")
    ap.add_argument("--config", type=str, required=True, help="YAML config file")
    # Optional overrides
    ap.add_argument("--gen", type=int, help="number of generations, 0 for no limit")
    ap.add_argument("--time", type=int, help="milliseconds between generations")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config).with_overrides(generations=args.gen, interval_ms=args.time)
    except LifeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    setup_logging(cfg.log_level)
    try:
        run_config(cfg)
    except LifeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
