"""Duration string parsing.

The grammar is a fixed sequence of optional unit groups (years down to milliseconds).
Each group is a signed, optionally fractional number followed by a unit token:

    [num years] [num weeks] [num days] [num hours] [num minutes] [num seconds] [num ms]

Groups are optional independently but must appear in that order. Whitespace is allowed
between groups and between a number and its unit. A bare number at the end of the input
(or line) is milliseconds. Anything left over after the last group is ignored.
"""

import logging
import math
import re
from dataclasses import dataclass

from mb_ms.units import UNITS, Unit

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?[0-9]*(?:\.[0-9]+)?")
_DIGITS = frozenset("0123456789")
_LINE_END_RE = re.compile(r"[^\S\r\n]*(?:[\r\n]|\Z)")


@dataclass(frozen=True, slots=True)
class GroupMatch:
    """A unit group found in the input."""

    unit: Unit
    number: str
    end: int

    @property
    def value(self) -> float:
        """Numeric value of the group; NaN when the number text has no digits."""
        return to_number(self.number)

    @property
    def ms(self) -> float:
        """Contribution of the group to the total, in milliseconds."""
        return self.value * self.unit.magnitude


def to_number(text: str) -> float:
    """Convert a number token ('-1.5', '.5', '', '-') to float, NaN if it has no digits."""
    if not any(ch in _DIGITS for ch in text):
        return math.nan
    return float(text)


def _skip_space(raw: str, pos: int) -> int:
    while pos < len(raw) and raw[pos].isspace():
        pos += 1
    return pos


def _match_spelling(unit: Unit, raw: str, pos: int) -> int | None:
    """Return the end position of the longest unit token of `unit` at `pos`, or None."""
    for spelling in unit.spellings:
        end = pos + len(spelling.token)
        if raw[pos:end].lower() != spelling.token:
            continue
        if end < len(raw) and raw[end].lower() in spelling.not_followed_by:
            continue
        return end
    return None


def match_group(unit: Unit, raw: str, pos: int = 0) -> GroupMatch | None:
    """Match one unit group of `unit` in `raw` starting at `pos`.

    Returns None when the group is absent at this position.
    """
    start = _skip_space(raw, pos)
    number = _NUMBER_RE.match(raw, start)
    if number is None:
        return None
    unit_pos = _skip_space(raw, number.end())

    end = _match_spelling(unit, raw, unit_pos)
    if end is not None:
        return GroupMatch(unit=unit, number=number.group(), end=end)

    # Elided unit: only a number that actually has digits, followed by end of line
    if unit.elidable and not math.isnan(to_number(number.group())):
        line_end = _LINE_END_RE.match(raw, number.end())
        if line_end is not None:
            return GroupMatch(unit=unit, number=number.group(), end=number.end())
    return None


def scan(raw: str) -> list[GroupMatch]:
    """Apply every unit group parser in precedence order, returning the groups found."""
    groups: list[GroupMatch] = []
    pos = 0
    for unit in UNITS:
        group = match_group(unit, raw, pos)
        if group is not None:
            groups.append(group)
            pos = group.end
    return groups


def parse(raw: str) -> float:
    """Parse a duration string into milliseconds.

    Returns NaN when no unit group is found. A group whose number has no digits
    (e.g. 'h' or '-d') is NaN as well and makes the whole result NaN.
    """
    groups = scan(raw)
    if not groups:
        logger.debug("No duration found in %r", raw)
        return math.nan

    total = 0.0
    for group in groups:
        total += group.ms
    if math.isnan(total):
        logger.debug("Duration %r has a unit without a number", raw)
    return total


def is_invalid(result: float) -> bool:
    """Return True if `result` is the not-a-number value returned for unparseable input."""
    return math.isnan(result)
