"""Display preferences shared by config, state and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Activity",
    "ColorTheme",
    "DisplayMode",
    "TimeDisplayConfig",
    "TimeFormat",
]


class TimeFormat(StrEnum):
    TWENTY_FOUR_HOUR = "24h"
    TWELVE_HOUR = "12h"

    def toggled(self) -> TimeFormat:
        if self is TimeFormat.TWENTY_FOUR_HOUR:
            return TimeFormat.TWELVE_HOUR
        return TimeFormat.TWENTY_FOUR_HOUR

    @property
    def strftime(self) -> str:
        """Pattern for the short time label under the scrub line."""
        if self is TimeFormat.TWELVE_HOUR:
            return "%I:%M %p %a"
        return "%H:%M %a"


class DisplayMode(StrEnum):
    """How a row title names its zone."""

    SHORT = "short"  # London UTC+1
    FULL = "full"  # London (Europe/London) UTC+1 BST

    def toggled(self) -> DisplayMode:
        return DisplayMode.FULL if self is DisplayMode.SHORT else DisplayMode.SHORT


class ColorTheme(StrEnum):
    DEFAULT = "default"
    OCEAN = "ocean"
    FOREST = "forest"
    SUNSET = "sunset"
    CYBERPUNK = "cyberpunk"
    MONOCHROME = "monochrome"

    def next(self) -> ColorTheme:
        """Following theme in declaration order, wrapping around."""
        members = list(ColorTheme)
        return members[(members.index(self) + 1) % len(members)]

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Activity(Enum):
    WORK = "work"
    AWAKE = "awake"
    NIGHT = "night"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Activity.WORK: "▓",
    Activity.AWAKE: "▒",
    Activity.NIGHT: "░",
}


@dataclass(frozen=True, slots=True)
class TimeDisplayConfig:
    """Hour bands used to shade the timeline.

    Ranges are half-open: with the defaults 08:00-17:59 is work, 06:00-07:59
    and 18:00-21:59 are awake, everything else is night.
    """

    work_hours_start: int = 8
    work_hours_end: int = 18
    awake_hours_start: int = 6
    awake_hours_end: int = 22

    def is_valid(self) -> bool:
        return (
            0
            <= self.awake_hours_start
            <= self.work_hours_start
            < self.work_hours_end
            <= self.awake_hours_end
            <= 24
        )

    def activity_for(self, hour: int) -> Activity:
        if self.work_hours_start <= hour < self.work_hours_end:
            return Activity.WORK
        if self.awake_hours_start <= hour < self.awake_hours_end:
            return Activity.AWAKE
        return Activity.NIGHT

    @property
    def work_middle_hour(self) -> int:
        return (self.work_hours_start + self.work_hours_end) // 2
