from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable

from .errors import FormatError

# A live cell with fewer live neighbours than this dies.
UNDERPOPULATION_LIMIT = 2
# A live cell with more live neighbours than this dies.
OVERPOPULATION_LIMIT = 3
# A dead cell with exactly this many live neighbours comes alive.
BIRTH_COUNT = 3
NEIGHBOURHOOD_SIZE = 8


def _counts(values: Iterable[int], name: str) -> FrozenSet[int]:
    out = frozenset(int(v) for v in values)
    bad = sorted(v for v in out if not 0 <= v <= NEIGHBOURHOOD_SIZE)
    if bad:
        raise FormatError(f"{name} counts must be in [0,{NEIGHBOURHOOD_SIZE}], got {bad}")
    return out


@dataclass(frozen=True)
class Rule:
    """Life-like rule given as birth and survival neighbour-count sets."""

    born: FrozenSet[int]
    survive: FrozenSet[int]

    def __post_init__(self):
        object.__setattr__(self, "born", _counts(self.born, "born"))
        object.__setattr__(self, "survive", _counts(self.survive, "survive"))

    def __str__(self) -> str:
        btxt = "".join(str(d) for d in sorted(self.born))
        stxt = "".join(str(d) for d in sorted(self.survive))
        return f"B{btxt}/S{stxt}"


CONWAY = Rule(
    born=frozenset({BIRTH_COUNT}),
    survive=frozenset(range(UNDERPOPULATION_LIMIT, OVERPOPULATION_LIMIT + 1)),
)


def next_state(alive: bool, count: int, rule: Rule = CONWAY) -> bool:
    """Return the next state of one cell given its live-neighbour count.

    With the default rule:
      1. a live cell with fewer than two live neighbours dies;
      2. a live cell with two or three live neighbours lives on;
      3. a live cell with more than three live neighbours dies;
      4. a dead cell with exactly three live neighbours comes alive.
    """
    if not 0 <= count <= NEIGHBOURHOOD_SIZE:
        raise ValueError(f"neighbour count must be in [0,{NEIGHBOURHOOD_SIZE}]")
    if alive:
        return count in rule.survive
    return count in rule.born


def parse_rule(text: str) -> Rule:
    """Parse ``B3/S23`` or ``B={3} S={2,3}`` into a :class:`Rule`."""
    m1 = re.fullmatch(r"\s*B\s*=\s*\{\s*([0-8,\s]*)\}\s*,?\s*S\s*=\s*\{\s*([0-8,\s]*)\}\s*", text, re.IGNORECASE)
    if m1:
        b_digits = re.findall(r"[0-8]", m1.group(1))
        s_digits = re.findall(r"[0-8]", m1.group(2))
    else:
        m2 = re.fullmatch(r"\s*B\s*([0-8]*)\s*/\s*S\s*([0-8]*)\s*", text, re.IGNORECASE)
        if not m2:
            raise FormatError(f"invalid rule {text!r}; expected e.g. B3/S23")
        b_digits = list(m2.group(1))
        s_digits = list(m2.group(2))
    return Rule(born=frozenset(int(d) for d in b_digits), survive=frozenset(int(d) for d in s_digits))
