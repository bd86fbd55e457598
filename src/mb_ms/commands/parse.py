"""Parse a duration string into milliseconds."""

import logging
import math
from typing import Annotated

import typer

from mb_ms.app_context import use_context
from mb_ms.convert import convert
from mb_ms.errors import InvalidInputError
from mb_ms.output import ParseResult

logger = logging.getLogger(__name__)


def parse(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(help="Duration: 2d, 1.5h, '2 days', '1h 30m', 100 (ms). Use -- before negative values.")],
) -> None:
    """Parse a duration string into milliseconds."""
    app = use_context(ctx)

    try:
        ms = convert(value)
    except InvalidInputError as e:
        app.out.print_error_and_exit("INVALID_INPUT", str(e))

    # NaN for no duration, inf when a digit run overflows
    if not math.isfinite(ms):
        logger.warning("Invalid duration input: %s", value)
        app.out.print_error_and_exit("INVALID_DURATION", f"Invalid duration: {value}. Examples: 2d, 1.5h, '2 days', 100.")

    app.out.print_parsed(ParseResult(input=value, ms=ms))
