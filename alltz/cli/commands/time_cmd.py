"""`alltz time <city>` - current time somewhere."""

from __future__ import annotations

from datetime import UTC, datetime

import typer

from alltz.cli.commands._helpers import resolve_zone
from alltz.cli.context import build_context
from alltz.core.display import TimeFormat
from alltz.time.zones import TimeZone


def format_current_time(zone: TimeZone, now: datetime, time_format: TimeFormat) -> str:
    """`Current time in London: 14:05:09 Mon 15 Jul 2024 (UTC+1 BST)`."""
    local = zone.convert_time(now)
    clock = "%I:%M:%S %p" if time_format is TimeFormat.TWELVE_HOUR else "%H:%M:%S"
    stamp = local.strftime(f"{clock} %a %d %b %Y")
    abbr = zone.abbreviation(now)
    offset = zone.offset_string(now)
    suffix = offset if not abbr or abbr == offset or abbr[0] in "+-" else f"{offset} {abbr}"
    return f"Current time in {zone.name}: {stamp} ({suffix})"


def time_in(
    city: str = typer.Argument(..., help="City name or IANA timezone"),
    time_format: TimeFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Clock format (defaults to the configured one)",
    ),
) -> None:
    """Show the current time in a city."""
    ctx = build_context()
    zone = resolve_zone(ctx, city)
    ctx.console.print(
        format_current_time(zone, datetime.now(UTC), time_format or ctx.config.time_format)
    )
