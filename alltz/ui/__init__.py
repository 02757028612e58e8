"""Terminal rendering: themes, timeline rows, dashboard and input."""

from .dashboard import render_dashboard
from .themes import Palette, palette_for
from .timeline import Cell, TimelineRow

__all__ = [
    "Cell",
    "Palette",
    "TimelineRow",
    "palette_for",
    "render_dashboard",
]
