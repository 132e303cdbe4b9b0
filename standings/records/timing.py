"""Ski time parsing and formatting.

Times are written as `MM:SS[.fraction]` and handled internally as fractional
minutes. Seconds of 60 or more are accepted as-is and simply added
arithmetically; only the shape, the numeric parse and the sign are checked.
"""

from __future__ import annotations

import math

from standings.constants import SECONDS_PER_MINUTE, TIME_SEPARATOR
from standings.errors import ParseError


def parse_time(token: str) -> float:
    """Convert a `minutes:seconds` token into fractional minutes."""

    parts = token.split(TIME_SEPARATOR)
    if len(parts) != 2:
        raise ParseError(f"Invalid time format: {token}", raw=token)

    try:
        minutes = int(parts[0])
        seconds = float(parts[1])
        total = minutes + seconds / SECONDS_PER_MINUTE
    except (ValueError, OverflowError) as exc:
        raise ParseError(f"Invalid time format: {token}", raw=token) from exc

    if minutes < 0 or seconds < 0 or not math.isfinite(total):
        raise ParseError(f"Invalid time format: {token}", raw=token)

    return total


def format_minutes(value: float) -> str:
    """Render fractional minutes as `M:SS.s`."""

    if value < 0 or not math.isfinite(value):
        raise ValueError("value must be a finite, non-negative number of minutes.")
    tenths = round(value * SECONDS_PER_MINUTE * 10)
    minutes, tenths_of_minute = divmod(tenths, int(SECONDS_PER_MINUTE * 10))
    return f"{minutes}:{tenths_of_minute / 10:04.1f}"
