from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from engine.board import MIN_SIDE
from engine.errors import FormatError, IoError, UsageError
from engine.rules import Rule, parse_rule

DEFAULT_INTERVAL_MS = 200
MAX_INTERVAL_MS = 86_400_000  # one day
DEFAULT_LOG_LEVEL = "WARNING"

CONFIG_KEYS = ("random", "input", "time", "gen", "seed", "rule", "log_level")


@dataclass(frozen=True)
class Config:
    """Settings for one run.

    Exactly one of ``random_size`` and ``input_path`` selects the board
    source. ``generations == 0`` runs until interrupted. ``rule=None`` means
    Conway's rule; a rule named in an RLE header is never applied.
    """

    random_size: Optional[Tuple[int, int]] = None
    input_path: Optional[Path] = None
    interval_ms: int = DEFAULT_INTERVAL_MS
    generations: int = 0
    seed: Optional[int] = None
    rule: Optional[Rule] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> "Config":
        if (self.random_size is None) == (self.input_path is None):
            raise UsageError("exactly one of -random and -input is required")
        if self.random_size is not None:
            rows, cols = self.random_size
            if rows < MIN_SIDE or cols < MIN_SIDE:
                raise UsageError(f"random board must be at least {MIN_SIDE}x{MIN_SIDE}, got {rows}x{cols}")
        if self.interval_ms < 0:
            raise UsageError("-time must not be negative")
        if self.interval_ms > MAX_INTERVAL_MS:
            raise UsageError(f"-time must be at most {MAX_INTERVAL_MS} ms, got {self.interval_ms}")
        if self.generations < 0:
            raise UsageError("-gen must not be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise UsageError(f"unknown log level {self.log_level!r}")
        return self

    @property
    def interval(self) -> float:
        """Pause between generations in seconds."""
        return self.interval_ms / 1000.0

    def with_overrides(self, **changes: Any) -> "Config":
        given = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **given).validate()


def _int(data: Mapping[str, Any], key: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    try:
        return int(data[key])
    except (TypeError, ValueError):
        raise UsageError(f"{key!r} must be an integer, got {data[key]!r}") from None


def config_from_mapping(data: Mapping[str, Any]) -> Config:
    """Build a validated Config from a mapping such as a parsed YAML file."""
    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise UsageError(f"unknown config keys: {', '.join(unknown)}")
    kwargs: Dict[str, Any] = {}
    if data.get("random") is not None:
        size = data["random"]
        if not isinstance(size, (list, tuple)) or len(size) != 2:
            raise UsageError("'random' must be a [rows, cols] pair")
        try:
            kwargs["random_size"] = (int(size[0]), int(size[1]))
        except (TypeError, ValueError):
            raise UsageError(f"'random' must hold integers, got {size!r}") from None
    if data.get("input") is not None:
        kwargs["input_path"] = Path(str(data["input"]))
    interval = _int(data, "time")
    if interval is not None:
        kwargs["interval_ms"] = interval
    generations = _int(data, "gen")
    if generations is not None:
        kwargs["generations"] = generations
    kwargs["seed"] = _int(data, "seed")
    if data.get("rule") is not None:
        try:
            kwargs["rule"] = parse_rule(str(data["rule"]))
        except FormatError as exc:
            raise UsageError(exc.msg) from None
    if data.get("log_level") is not None:
        kwargs["log_level"] = str(data["log_level"])
    return Config(**kwargs).validate()


def load_config(path: Path) -> Config:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise IoError(f"could not open {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise UsageError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise UsageError(f"{path} must contain a mapping")
    return config_from_mapping(data)
