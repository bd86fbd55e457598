"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Any, NoReturn

import typer

from mb_ms.formatter import format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of parsing a duration string."""

    input: str
    ms: float


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Result of formatting a millisecond count."""

    ms: float
    text: str
    long: bool


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1."""
        logger.error("Command error: [%s] %s", code, message)
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_parsed(self, result: ParseResult) -> None:
        """Print the millisecond count of a parsed duration."""
        self._success(_with_int_ms(asdict(result)), format_number(result.ms))

    def print_formatted(self, result: FormatResult) -> None:
        """Print a formatted duration."""
        self._success(_with_int_ms(asdict(result)), result.text)


def _with_int_ms(data: dict[str, Any]) -> dict[str, Any]:
    """Emit integral millisecond counts as JSON integers (5000, not 5000.0)."""
    ms = data["ms"]
    if isinstance(ms, float) and ms.is_integer():
        data["ms"] = int(ms)
    return data
