"""Dashboard state: the zone list and the shared scrub position.

Every row renders against one instant, `timeline_position`. It is stored as an
offset from the live clock so the dashboard keeps moving in real time while
the user is looking at "now + 3h".
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

from alltz.core.config import Config
from alltz.core.display import ColorTheme, DisplayMode, TimeDisplayConfig, TimeFormat
from alltz.core.result import Err
from alltz.time.zones import DEFAULT_ZONE_KEYS, TimeZone, TimezoneRegistry

__all__ = ["AppState", "MAX_SCRUB", "format_scrub_offset"]

MAX_SCRUB = timedelta(days=365)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def format_scrub_offset(offset: timedelta) -> str:
    """`now`, `+3h`, `-1d 2h 15m`."""
    total = int(offset.total_seconds()) // 60
    if total == 0:
        return "now"
    sign = "+" if total > 0 else "-"
    days, rem = divmod(abs(total), 24 * 60)
    hours, minutes = divmod(rem, 60)
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return sign + " ".join(parts)


@dataclass
class AppState:
    zones: list[TimeZone]
    current_time: datetime = field(default_factory=_utcnow)
    offset: timedelta = timedelta(0)
    selected: int = 0
    local_zone: TimeZone | None = None
    time_format: TimeFormat = TimeFormat.TWENTY_FOUR_HOUR
    display_mode: DisplayMode = DisplayMode.SHORT
    theme: ColorTheme = ColorTheme.DEFAULT
    show_date: bool = False
    show_help: bool = False
    hours: TimeDisplayConfig = field(default_factory=TimeDisplayConfig)
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self.zones:
            raise ValueError("AppState needs at least one timezone")
        self.selected = max(0, min(self.selected, len(self.zones) - 1))

    # -- construction ---------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config: Config,
        registry: TimezoneRegistry,
        now: datetime | None = None,
    ) -> tuple[AppState, list[str]]:
        """Build state from saved preferences.

        Returns the state and warnings for zones that could not be resolved.
        With no saved zones the local zone plus a default set is shown.
        """
        warnings: list[str] = []
        local = registry.local()
        zones: list[TimeZone] = []

        keys = config.timezones or (local.key, *DEFAULT_ZONE_KEYS)
        for key in keys:
            result = registry.from_key(key)
            if isinstance(result, Err):
                warnings.append(f"skipping unknown timezone in config: {key}")
                continue
            if all(z.key != result.value.key for z in zones):
                zones.append(result.value)

        if not zones:
            zones = [local]

        state = cls(
            zones=zones,
            current_time=now or _utcnow(),
            local_zone=local,
            time_format=config.time_format,
            display_mode=config.display_mode,
            theme=config.theme,
            show_date=config.show_date,
            hours=config.hours,
        )
        return state, warnings

    def to_config(self, base: Config) -> Config:
        return replace(
            base,
            timezones=tuple(z.key for z in self.zones),
            time_format=self.time_format,
            display_mode=self.display_mode,
            theme=self.theme,
            show_date=self.show_date,
        )

    # -- time -----------------------------------------------------------------

    @property
    def timeline_position(self) -> datetime:
        return self.current_time + self.offset

    @property
    def is_scrubbed(self) -> bool:
        return self.offset != timedelta(0)

    def tick(self, now: datetime | None = None) -> None:
        """Advance the live clock; the scrub offset is kept."""
        self.current_time = now or _utcnow()

    def scrub(self, delta: timedelta) -> None:
        self.offset = max(-MAX_SCRUB, min(MAX_SCRUB, self.offset + delta))

    def reset_to_now(self) -> None:
        self.offset = timedelta(0)

    # -- navigation -----------------------------------------------------------

    @property
    def selected_zone(self) -> TimeZone:
        return self.zones[self.selected]

    def select_next(self) -> None:
        self.selected = (self.selected + 1) % len(self.zones)

    def select_previous(self) -> None:
        self.selected = (self.selected - 1) % len(self.zones)

    def move_selected(self, step: int) -> None:
        """Swap the selected zone with its neighbour; no-op at the ends."""
        target = self.selected + step
        if not 0 <= target < len(self.zones):
            return
        self.zones[self.selected], self.zones[target] = self.zones[target], self.zones[self.selected]
        self.selected = target
        self.dirty = True

    def add_zone(self, zone: TimeZone) -> bool:
        """Append and select `zone`; returns False if it is already listed."""
        for i, existing in enumerate(self.zones):
            if existing.key == zone.key:
                self.selected = i
                return False
        self.zones.append(zone)
        self.selected = len(self.zones) - 1
        self.dirty = True
        return True

    def remove_selected(self) -> TimeZone | None:
        """Drop the selected zone unless it is the last one."""
        if len(self.zones) <= 1:
            return None
        removed = self.zones.pop(self.selected)
        self.selected = min(self.selected, len(self.zones) - 1)
        self.dirty = True
        return removed

    # -- toggles --------------------------------------------------------------

    def cycle_theme(self) -> None:
        self.theme = self.theme.next()
        self.dirty = True

    def toggle_date(self) -> None:
        self.show_date = not self.show_date
        self.dirty = True

    def toggle_time_format(self) -> None:
        self.time_format = self.time_format.toggled()
        self.dirty = True

    def toggle_display_mode(self) -> None:
        self.display_mode = self.display_mode.toggled()
        self.dirty = True

    def toggle_help(self) -> None:
        self.show_help = not self.show_help
