"""CLI entry point for mb-ms."""

from importlib.metadata import version
from pathlib import Path
from typing import Annotated

import typer

from mb_ms.app_context import AppContext
from mb_ms.commands.format import format_
from mb_ms.commands.parse import parse
from mb_ms.config import Config, resolve_data_dir
from mb_ms.errors import ConfigError
from mb_ms.log import setup_logging
from mb_ms.output import Output

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(version("mb-ms"))
        raise typer.Exit


@app.callback()
def main(
    ctx: typer.Context,
    *,
    version: Annotated[
        bool | None, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit.")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", help="Application data directory (config, log). Defaults to $MB_MS_DATA_DIR or ~/.local/mb-ms."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug messages to stderr.")] = False,
) -> None:
    """Convert between duration strings and milliseconds."""
    _ = version
    out = Output(json_mode=json_output)
    resolved_dir = resolve_data_dir(data_dir).resolve()
    resolved_dir.mkdir(parents=True, exist_ok=True)
    try:
        cfg = Config.build(resolved_dir)
    except ConfigError as e:
        setup_logging(Config(data_dir=resolved_dir).log_path, verbose=verbose)
        out.print_error_and_exit("INVALID_CONFIG", str(e))
    setup_logging(cfg.log_path, verbose=verbose)
    ctx.obj = AppContext(out=out, cfg=cfg)


app.command()(parse)
app.command(name="format")(format_)
