"""Wall-clock time parsing.

Parsing is permissive: a malformed part becomes NaN instead of raising, so
bad input flows through to NaN hours and totals. Use
``shift_pay.calculators.validation`` to reject such input up front.
"""

from __future__ import annotations

import math
import re

_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def to_number(part: str | None) -> float:
    """Convert a string part to a number, returning NaN when it is not one.

    Blank strings count as zero.
    """
    if part is None:
        return math.nan
    stripped = part.strip()
    if not stripped:
        return 0.0
    if not _NUMBER_RE.fullmatch(stripped):
        return math.nan
    return float(stripped)


def parse_time(value: str) -> tuple[float, float]:
    """Split "HH:MM" into (hours, minutes)."""
    parts = value.split(":")
    hours = to_number(parts[0])
    minutes = to_number(parts[1]) if len(parts) > 1 else math.nan
    return hours, minutes


def time_in_hours(value: str) -> float:
    """Return the time as fractional hours, e.g. "16:30" -> 16.5."""
    hours, minutes = parse_time(value)
    return hours + minutes / 60
