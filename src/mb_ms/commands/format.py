"""Format a millisecond count as a human-readable duration."""

from typing import Annotated

import typer

from mb_ms.app_context import use_context
from mb_ms.convert import convert
from mb_ms.errors import InvalidInputError
from mb_ms.output import FormatResult


def format_(
    ctx: typer.Context,
    ms: Annotated[float, typer.Argument(help="Milliseconds. Use -- before negative values.")],
    long: Annotated[
        bool | None, typer.Option("--long/--short", "-l/-s", help="Verbose or compact style. Default from config.")
    ] = None,
) -> None:
    """Format a millisecond count as a human-readable duration."""
    app = use_context(ctx)

    if long is None:
        long = app.cfg.long_format

    try:
        text = convert(ms, long=long)
    except InvalidInputError as e:
        app.out.print_error_and_exit("INVALID_INPUT", str(e))

    app.out.print_formatted(FormatResult(ms=ms, text=text, long=long))
