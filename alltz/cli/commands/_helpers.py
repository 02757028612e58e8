"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from alltz.core.errors import ErrorCode
from alltz.core.result import Err, Ok, Result
from alltz.output.console import Style
from alltz.time.zones import TimeZone, ZoneLookupError

if TYPE_CHECKING:
    from alltz.cli.context import CLIContext


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.USER_ERROR,
) -> None:
    """Print the error (and its hint) and exit if `result` is Err.

    Error objects are expected to expose `message` and optionally `hint`.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))


def resolve_zone(ctx: CLIContext, city: str) -> TimeZone:
    """Look up `city` or exit with USER_ERROR."""
    result: Result[TimeZone, ZoneLookupError] = ctx.registry.find(city)
    exit_on_error(result, ctx, ErrorCode.USER_ERROR)
    assert isinstance(result, Ok)
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)
