"""`alltz zone <city>` - timezone details including the next DST change."""

from __future__ import annotations

from datetime import UTC, datetime

import typer

from alltz.cli.commands._helpers import resolve_zone
from alltz.cli.context import build_context
from alltz.output.console import Style
from alltz.time.dst import next_transition
from alltz.time.zones import TimeZone


def zone_details(zone: TimeZone, now: datetime) -> list[tuple[str, str]]:
    """(label, value) pairs describing `zone` at `now`."""
    local = zone.convert_time(now)
    rows = [
        ("Timezone", zone.key),
        ("Region", zone.region or "-"),
        ("Local time", local.strftime("%H:%M %a %d %b %Y")),
        ("UTC offset", zone.offset_string(now)),
        ("Abbreviation", zone.abbreviation(now) or "-"),
        ("DST active", "yes" if zone.is_dst(now) else "no"),
    ]

    upcoming = next_transition(zone, now)
    if upcoming is None:
        rows.append(("Next DST change", "none"))
    else:
        when, kind = upcoming
        after = zone.convert_time(when)
        rows.append(
            (
                "Next DST change",
                f"{kind} {kind.symbol} at {after.strftime('%H:%M %a %d %b %Y')}"
                f" ({zone.offset_string(when)})",
            )
        )
    return rows


def zone_info(
    city: str = typer.Argument(..., help="City name or IANA timezone"),
) -> None:
    """Show timezone details for a city."""
    ctx = build_context()
    zone = resolve_zone(ctx, city)

    ctx.console.header(zone.name)
    for label, value in zone_details(zone, datetime.now(UTC)):
        ctx.console.print(f"{label + ':':<17}{value}")
    if zone.key in ctx.config.timezones:
        ctx.console.print("in your timezone list", Style.DIM)
