"""Duration unit classes, their millisecond magnitudes, and accepted spellings."""

from dataclasses import dataclass
from enum import StrEnum

SECOND_MS = 1000
MINUTE_MS = SECOND_MS * 60
HOUR_MS = MINUTE_MS * 60
DAY_MS = HOUR_MS * 24
WEEK_MS = DAY_MS * 7
YEAR_MS = DAY_MS * 365.25


class UnitClass(StrEnum):
    """Unit class, declared in parsing precedence order."""

    YEARS = "years"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


@dataclass(frozen=True, slots=True)
class Spelling:
    """One accepted unit token.

    A token is rejected when the character right after it is in `not_followed_by`,
    e.g. a bare 'm' must not eat the start of 'ms' or 'min'.
    """

    token: str
    not_followed_by: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class Unit:
    """Unit class with its magnitude in milliseconds and its spellings, longest first."""

    cls: UnitClass
    magnitude: float
    spellings: tuple[Spelling, ...]
    elidable: bool = False  # a bare number at end of input counts as this unit


def _spellings(*tokens: str) -> tuple[Spelling, ...]:
    return tuple(Spelling(token) for token in tokens)


UNITS: tuple[Unit, ...] = (
    Unit(UnitClass.YEARS, YEAR_MS, _spellings("years", "year", "yrs", "yr", "y")),
    Unit(UnitClass.WEEKS, WEEK_MS, _spellings("weeks", "week", "w")),
    Unit(UnitClass.DAYS, DAY_MS, _spellings("days", "day", "d")),
    Unit(UnitClass.HOURS, HOUR_MS, _spellings("hours", "hour", "hrs", "hr", "h")),
    Unit(
        UnitClass.MINUTES,
        MINUTE_MS,
        (*_spellings("minutes", "minute", "mins", "min"), Spelling("m", not_followed_by=frozenset("si"))),
    ),
    Unit(UnitClass.SECONDS, SECOND_MS, _spellings("seconds", "second", "secs", "sec", "s")),
    Unit(
        UnitClass.MILLISECONDS,
        1,
        _spellings("milliseconds", "millisecond", "msecs", "msec", "ms"),
        elidable=True,
    ),
)

UNITS_BY_CLASS: dict[UnitClass, Unit] = {unit.cls: unit for unit in UNITS}
