"""`alltz list` - show the timezone catalog."""

from __future__ import annotations

from datetime import UTC, datetime

from alltz.cli.context import build_context
from alltz.output.console import Style


def list_zones() -> None:
    """Show available timezones."""
    ctx = build_context()
    now = datetime.now(UTC)
    configured = set(ctx.config.timezones)

    ctx.console.header("Available Timezones")
    for zone in ctx.registry.all(now):
        marker = "*" if zone.key in configured else " "
        line = f"{marker} {zone.name:<14} {zone.key:<32} {zone.offset_string(now)}"
        ctx.console.print(line, Style.BOLD if marker == "*" else Style.DEFAULT)

    ctx.console.newline()
    if configured:
        ctx.console.print("* in your timezone list", Style.DIM)
    ctx.console.print("Any IANA name (e.g. America/Lima) also works with time/zone/add.", Style.DIM)
