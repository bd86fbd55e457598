"""Single entry point: parse a duration string or format a millisecond count."""

import json
import logging
import math
from typing import overload

from mb_ms.errors import InvalidInputError
from mb_ms.formatter import format_long, format_short
from mb_ms.parser import parse

logger = logging.getLogger(__name__)

_UNKNOWN_ERROR = "An unknown error has occurred."


@overload
def convert(value: str, *, long: bool = False) -> float: ...


@overload
def convert(value: float, *, long: bool = False) -> str: ...


def convert(value: str | float, *, long: bool = False) -> float | str:
    """Parse a duration string or format a millisecond count.

    Args:
        value: Non-empty duration string ('2 days', '1.5h', '-100') or a finite number of milliseconds.
        long: Use verbose formatting ('5 seconds' instead of '5s'). Has no effect on parsing.

    Returns:
        Milliseconds (NaN if the string holds no duration) for a string, formatted string for a number.

    Raises:
        InvalidInputError: If value is neither a non-empty string nor a finite number, or conversion failed.

    """
    try:
        if isinstance(value, str) and value:
            return parse(value)
        # bool is an int subclass but not a millisecond count
        if isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value):
            return format_long(value) if long else format_short(value)
        raise InvalidInputError("Value is not a non-empty string or a finite number", value)
    except Exception as e:
        reason = str(e)
        message = f"{reason}. value={_dump(value)}" if reason else _UNKNOWN_ERROR
        logger.debug("Conversion rejected: %s", message)
        raise InvalidInputError(message, value) from e


def _dump(value: object) -> str:
    """Serialize the offending value for error messages, repr() if it is not JSON-serializable."""
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError, RecursionError):
        return repr(value)
