from __future__ import annotations

from pathlib import Path

from engine.errors import IoError


def read_text(path: Path) -> str:
    try:
        return Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(f"could not open {path}: {exc}") from exc
