"""One timezone row: a 48-hour bar centred on the scrub position.

The bar is computed as a list of (glyph, style) cells first and only then
turned into rich Text, so layout can be tested without a terminal.

Layers, later ones drawn over earlier ones:
  1. activity shading for the local hour at each column
  2. the live-clock line `│`
  3. the scrub line `┃` (skipped when it shares the live-clock column)
  4. DST markers `⇈` / `⇊`
  5. date labels centred on the middle of each local work day
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from rich.text import Text

from alltz.core.display import DisplayMode, TimeDisplayConfig, TimeFormat
from alltz.time.dst import DstTransition, transitions_in_range
from alltz.time.zones import TimeZone

from .themes import Palette

__all__ = ["Cell", "TimelineRow", "WINDOW"]

WINDOW = timedelta(hours=24)  # each side of the scrub position

NOW_GLYPH = "│"
POSITION_GLYPH = "┃"


@dataclass(frozen=True, slots=True)
class Cell:
    char: str
    style: str


def _centred(anchor: int, length: int, width: int) -> int:
    start = max(0, anchor - length // 2)
    return max(0, min(start, width - length))


@dataclass(frozen=True, slots=True)
class TimelineRow:
    zone: TimeZone
    timeline_position: datetime
    current_time: datetime
    palette: Palette
    hours: TimeDisplayConfig
    time_format: TimeFormat = TimeFormat.TWENTY_FOUR_HOUR
    display_mode: DisplayMode = DisplayMode.SHORT
    selected: bool = False
    show_date: bool = False
    show_dst: bool = True

    @property
    def start(self) -> datetime:
        return self.timeline_position - WINDOW

    @property
    def end(self) -> datetime:
        return self.timeline_position + WINDOW

    def time_to_position(self, when: datetime, width: int) -> int:
        """Column for `when`; values outside the window are clamped to the edges."""
        if width <= 0:
            return 0
        total = (self.end - self.start).total_seconds()
        ratio = (when - self.start).total_seconds() / total
        # halves round up
        position = math.floor(ratio * width + 0.5)
        return max(0, min(position, width - 1))

    def _in_window(self, when: datetime) -> bool:
        return self.start <= when <= self.end

    def title(self) -> str:
        if self.display_mode is DisplayMode.FULL:
            return self.zone.full_display_name(self.timeline_position)
        return f"{self.zone.display_name()} {self.zone.offset_string(self.timeline_position)}"

    def dst_transitions(self) -> list[tuple[datetime, DstTransition]]:
        return transitions_in_range(self.zone, self.start, self.end)

    def _shading(self, width: int) -> list[Cell]:
        span = (self.end - self.start).total_seconds()
        cells: list[Cell] = []
        for i in range(width):
            # walk in UTC so DST days keep the right local hour
            at = self.start + timedelta(seconds=span * i / width)
            hour = self.zone.convert_time(at).hour
            activity = self.hours.activity_for(hour)
            cells.append(Cell(activity.glyph, self.palette.activity(activity)))
        return cells

    def _date_labels(self, width: int) -> list[tuple[int, str]]:
        labels: list[tuple[int, str]] = []
        first: date = self.zone.convert_time(self.start).date()
        last: date = self.zone.convert_time(self.end).date()
        middle = time(self.hours.work_middle_hour % 24)
        day = first
        while day <= last:
            local = datetime.combine(day, middle, tzinfo=self.zone.tz)
            utc = local.astimezone(UTC)
            # skip local times that a DST gap makes nonexistent
            if utc.astimezone(self.zone.tz).replace(tzinfo=None) == local.replace(tzinfo=None):
                if self._in_window(utc):
                    text = day.strftime("%d %b")
                    pos = self.time_to_position(utc, width)
                    labels.append((_centred(pos, len(text), width), text))
            day += timedelta(days=1)
        return labels

    def cells(self, width: int) -> list[Cell]:
        """The bar as `width` styled cells."""
        if width <= 0:
            return []
        cells = self._shading(width)

        # outside the window the live clock sticks to the edge it lies beyond
        now_col = self.time_to_position(self.current_time, width)
        cells[now_col] = Cell(NOW_GLYPH, self.palette.current_time)

        pos_col = self.time_to_position(self.timeline_position, width)
        if pos_col != now_col:
            cells[pos_col] = Cell(POSITION_GLYPH, self.palette.timeline_position)

        if self.show_dst:
            for when, kind in self.dst_transitions():
                col = self.time_to_position(when, width)
                cells[col] = Cell(kind.symbol, self.palette.transition(kind))

        if self.show_date:
            for x, text in self._date_labels(width):
                for i, ch in enumerate(text):
                    if x + i < width:
                        cells[x + i] = Cell(ch, self.palette.date_label)
        return cells

    def time_label(self, width: int) -> tuple[int, str]:
        """Scrubbed local time and the column it starts at, centred on the scrub line."""
        text = self.zone.convert_time(self.timeline_position).strftime(self.time_format.strftime)
        if width <= 0:
            return 0, ""
        text = text[:width]
        pos = self.time_to_position(self.timeline_position, width)
        return _centred(pos, len(text), width), text

    def render_lines(self, width: int) -> list[Text]:
        """Bar and time label as rich Text, each exactly `width` wide."""
        bar = Text()
        for cell in self.cells(width):
            bar.append(cell.char, style=cell.style)

        x, label = self.time_label(width)
        under = Text(" " * x)
        under.append(label, style="bold" if self.selected else "")
        under.append(" " * max(0, width - x - len(label)))
        return [bar, under]
