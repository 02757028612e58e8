"""Full-screen dashboard layout."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from alltz import __version__
from alltz.app.actions import HELP_LINES
from alltz.app.state import AppState, format_scrub_offset
from alltz.core.display import TimeFormat
from alltz.time.zones import format_offset

from .themes import palette_for
from .timeline import TimelineRow

__all__ = ["render_dashboard", "header_text", "rows_for"]

# Panel border plus one column of padding on each side
_PANEL_CHROME = 4


def header_text(state: AppState) -> Text:
    """Scrubbed instant in the local zone, with its day and UTC offset."""
    palette = palette_for(state.theme)
    local = state.local_zone or state.selected_zone
    when = local.convert_time(state.timeline_position)
    clock = "%I:%M %p" if state.time_format is TimeFormat.TWELVE_HOUR else "%H:%M"

    text = Text()
    text.append(f"alltz {__version__}", style=palette.header)
    text.append("  ")
    text.append(f"{local.display_name()}: ", style="dim")
    text.append(when.strftime(f"{clock} %a %d %b %Y"), style="bold")
    text.append(f" ({format_offset(local.offset_at(state.timeline_position))})", style="dim")
    text.append("  ")
    scrub = format_scrub_offset(state.offset)
    text.append(f"[{scrub}]", style=palette.timeline_position if state.is_scrubbed else "dim")
    text.append(f"  theme: {state.theme.label}", style="dim")
    return text


def rows_for(state: AppState) -> list[TimelineRow]:
    palette = palette_for(state.theme)
    return [
        TimelineRow(
            zone=zone,
            timeline_position=state.timeline_position,
            current_time=state.current_time,
            palette=palette,
            hours=state.hours,
            time_format=state.time_format,
            display_mode=state.display_mode,
            selected=i == state.selected,
            show_date=state.show_date,
        )
        for i, zone in enumerate(state.zones)
    ]


def _footer() -> Text:
    return Text(
        "?: help  h/l: scrub  j/k: select  t: now  c: theme  d: date  q: quit",
        style="dim",
    )


def _help_panel(state: AppState) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    for keys, description in HELP_LINES:
        table.add_row(keys, description)
    return Panel(
        table,
        title="Help",
        subtitle="press any key",
        border_style=palette_for(state.theme).selected_border,
        expand=False,
    )


def render_dashboard(state: AppState, width: int) -> RenderableType:
    """Everything on screen for one frame, laid out for a terminal `width` wide."""
    palette = palette_for(state.theme)
    inner = max(1, width - _PANEL_CHROME)

    parts: list[RenderableType] = [header_text(state)]
    if state.show_help:
        parts.append(_help_panel(state))
    else:
        for row in rows_for(state):
            parts.append(
                Panel(
                    Group(*row.render_lines(inner)),
                    title=row.title(),
                    title_align="left",
                    border_style=palette.selected_border if row.selected else "grey50",
                    padding=(0, 1),
                    width=width,
                )
            )
    parts.append(_footer())
    return Group(*parts)
