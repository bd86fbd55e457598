"""Per-invocation application state shared by CLI commands."""

from dataclasses import dataclass

import typer

from mb_ms.config import Config
from mb_ms.output import Output


@dataclass(frozen=True, slots=True)
class AppContext:
    """State built by the CLI callback and stored on typer.Context.obj."""

    out: Output
    cfg: Config


def use_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext of the current invocation."""
    app = ctx.obj
    if not isinstance(app, AppContext):
        raise TypeError("AppContext is not initialized")
    return app
