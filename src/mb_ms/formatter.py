"""Millisecond formatting: compact ('2d') and verbose ('2 days')."""

import re
from decimal import ROUND_HALF_UP, Decimal

from mb_ms.units import DAY_MS, HOUR_MS, MINUTE_MS, SECOND_MS

# Checked in order, first threshold reached wins
_SCALES: tuple[tuple[int, str, str], ...] = (
    (DAY_MS, "d", "day"),
    (HOUR_MS, "h", "hour"),
    (MINUTE_MS, "m", "minute"),
    (SECOND_MS, "s", "second"),
)

_PLURAL_FACTOR = 1.5
_EXPONENT_PAD_RE = re.compile(r"e([+-])0+(?=\d)")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a number the short way: '500' for 500.0, '1.5' for 1.5, '1e-7' for 1e-07."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return _EXPONENT_PAD_RE.sub(r"e\1", repr(value))


def format_short(ms: float) -> str:
    """Format milliseconds as a compact string, e.g. '5s', '-2m', '500ms'."""
    ms_abs = abs(ms)
    for magnitude, suffix, _ in _SCALES:
        if ms_abs >= magnitude:
            return f"{round_half_away(ms / magnitude)}{suffix}"
    return f"{format_number(ms)}ms"


def format_long(ms: float) -> str:
    """Format milliseconds as a verbose string, e.g. '1 minute', '2 days', '500 ms'.

    The plural form is used from 1.5 units on, so 89999 is '1 minute' and 90000 is '2 minutes'.
    """
    ms_abs = abs(ms)
    for magnitude, _, name in _SCALES:
        if ms_abs >= magnitude:
            return _plural(ms, ms_abs, magnitude, name)
    return f"{format_number(ms)} ms"


def _plural(ms: float, ms_abs: float, magnitude: int, name: str) -> str:
    is_plural = ms_abs >= magnitude * _PLURAL_FACTOR
    return f"{round_half_away(ms / magnitude)} {name}{'s' if is_plural else ''}"
