"""Shooting penalty scoring for a single bout."""

from __future__ import annotations

from enum import Enum

from standings.constants import HIT_SYMBOL, MISS_SYMBOL, PENALTY_PER_MISS
from standings.errors import ParseError


class ShotOutcome(Enum):
    """Symbols used in a bout string, one character per shot."""

    HIT = HIT_SYMBOL
    MISS = MISS_SYMBOL


_KNOWN_SYMBOLS = frozenset(outcome.value for outcome in ShotOutcome)


def count_misses(bout: str) -> int:
    return bout.count(ShotOutcome.MISS.value)


def calculate_penalty(bout: str, *, strict: bool = False) -> int:
    """Return the penalty in seconds contributed by one bout.

    By default any character other than the miss symbol counts as a hit, so the
    function never fails. With `strict=True` every character must be a known
    `ShotOutcome` symbol.
    """

    if strict:
        for symbol in bout:
            if symbol not in _KNOWN_SYMBOLS:
                raise ParseError(f"Unknown shot symbol {symbol!r} in bout: {bout}", raw=bout)
    return count_misses(bout) * PENALTY_PER_MISS
