"""Colour palettes for the six dashboard themes.

Colours are rich style strings so they can be dropped straight into
`rich.text.Text.append`.
"""

from __future__ import annotations

from dataclasses import dataclass

from alltz.core.display import Activity, ColorTheme
from alltz.time.dst import DstTransition

__all__ = ["Palette", "palette_for"]


@dataclass(frozen=True, slots=True)
class Palette:
    work: str
    awake: str
    night: str
    selected_border: str
    current_time: str
    timeline_position: str
    spring_forward: str = "green"
    fall_back: str = "yellow"
    date_label: str = "white on grey23"
    header: str = "bold"

    def activity(self, activity: Activity) -> str:
        if activity is Activity.WORK:
            return self.work
        if activity is Activity.AWAKE:
            return self.awake
        return self.night

    def transition(self, kind: DstTransition) -> str:
        if kind is DstTransition.SPRING_FORWARD:
            return self.spring_forward
        return self.fall_back


_PALETTES: dict[ColorTheme, Palette] = {
    ColorTheme.DEFAULT: Palette(
        work="green",
        awake="yellow",
        night="grey42",
        selected_border="cyan",
        current_time="red",
        timeline_position="bright_white",
        header="bold cyan",
    ),
    ColorTheme.OCEAN: Palette(
        work="dodger_blue1",
        awake="steel_blue",
        night="navy_blue",
        selected_border="turquoise2",
        current_time="orange1",
        timeline_position="bright_cyan",
        header="bold turquoise2",
    ),
    ColorTheme.FOREST: Palette(
        work="green3",
        awake="dark_olive_green3",
        night="dark_green",
        selected_border="chartreuse2",
        current_time="orange3",
        timeline_position="light_goldenrod1",
        header="bold green3",
    ),
    ColorTheme.SUNSET: Palette(
        work="orange1",
        awake="light_salmon1",
        night="purple4",
        selected_border="magenta",
        current_time="bright_red",
        timeline_position="gold1",
        spring_forward="yellow1",
        fall_back="orchid",
        header="bold orange1",
    ),
    ColorTheme.CYBERPUNK: Palette(
        work="magenta",
        awake="bright_cyan",
        night="grey23",
        selected_border="bright_magenta",
        current_time="bright_yellow",
        timeline_position="bright_green",
        spring_forward="bright_green",
        fall_back="bright_yellow",
        date_label="black on bright_cyan",
        header="bold bright_magenta",
    ),
    ColorTheme.MONOCHROME: Palette(
        work="bright_white",
        awake="grey70",
        night="grey35",
        selected_border="bright_white",
        current_time="bold white",
        timeline_position="bold bright_white",
        spring_forward="bold white",
        fall_back="bold white",
        date_label="black on white",
        header="bold white",
    ),
}


def palette_for(theme: ColorTheme) -> Palette:
    return _PALETTES[theme]
