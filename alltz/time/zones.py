"""Timezone registry: city names mapped to IANA zones.

A curated catalog covers the cities people usually ask for; any other valid
IANA key can still be added through `TimezoneRegistry.from_key`. Offsets and
DST rules come from the system tz database (or the `tzdata` package where the
OS has none) through `zoneinfo`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

import tzlocal

from alltz.core.result import Err, Ok, Result

__all__ = [
    "CATALOG",
    "DEFAULT_ZONE_KEYS",
    "TimeZone",
    "TimezoneRegistry",
    "ZoneLookupError",
    "format_offset",
]

# (city, IANA key, region)
CATALOG: tuple[tuple[str, str, str], ...] = (
    ("Honolulu", "Pacific/Honolulu", "United States"),
    ("Anchorage", "America/Anchorage", "United States"),
    ("Los Angeles", "America/Los_Angeles", "United States"),
    ("Vancouver", "America/Vancouver", "Canada"),
    ("Denver", "America/Denver", "United States"),
    ("Phoenix", "America/Phoenix", "United States"),
    ("Chicago", "America/Chicago", "United States"),
    ("Mexico City", "America/Mexico_City", "Mexico"),
    ("New York", "America/New_York", "United States"),
    ("Toronto", "America/Toronto", "Canada"),
    ("Bogota", "America/Bogota", "Colombia"),
    ("Halifax", "America/Halifax", "Canada"),
    ("Santiago", "America/Santiago", "Chile"),
    ("St Johns", "America/St_Johns", "Canada"),
    ("Sao Paulo", "America/Sao_Paulo", "Brazil"),
    ("Buenos Aires", "America/Argentina/Buenos_Aires", "Argentina"),
    ("Reykjavik", "Atlantic/Reykjavik", "Iceland"),
    ("UTC", "UTC", "Coordinated Universal Time"),
    ("London", "Europe/London", "United Kingdom"),
    ("Dublin", "Europe/Dublin", "Ireland"),
    ("Lisbon", "Europe/Lisbon", "Portugal"),
    ("Lagos", "Africa/Lagos", "Nigeria"),
    ("Paris", "Europe/Paris", "France"),
    ("Berlin", "Europe/Berlin", "Germany"),
    ("Madrid", "Europe/Madrid", "Spain"),
    ("Rome", "Europe/Rome", "Italy"),
    ("Amsterdam", "Europe/Amsterdam", "Netherlands"),
    ("Stockholm", "Europe/Stockholm", "Sweden"),
    ("Warsaw", "Europe/Warsaw", "Poland"),
    ("Cairo", "Africa/Cairo", "Egypt"),
    ("Johannesburg", "Africa/Johannesburg", "South Africa"),
    ("Athens", "Europe/Athens", "Greece"),
    ("Helsinki", "Europe/Helsinki", "Finland"),
    ("Kyiv", "Europe/Kyiv", "Ukraine"),
    ("Istanbul", "Europe/Istanbul", "Turkey"),
    ("Moscow", "Europe/Moscow", "Russia"),
    ("Nairobi", "Africa/Nairobi", "Kenya"),
    ("Tehran", "Asia/Tehran", "Iran"),
    ("Dubai", "Asia/Dubai", "United Arab Emirates"),
    ("Karachi", "Asia/Karachi", "Pakistan"),
    ("Mumbai", "Asia/Kolkata", "India"),
    ("Kathmandu", "Asia/Kathmandu", "Nepal"),
    ("Dhaka", "Asia/Dhaka", "Bangladesh"),
    ("Bangkok", "Asia/Bangkok", "Thailand"),
    ("Jakarta", "Asia/Jakarta", "Indonesia"),
    ("Singapore", "Asia/Singapore", "Singapore"),
    ("Hong Kong", "Asia/Hong_Kong", "China"),
    ("Shanghai", "Asia/Shanghai", "China"),
    ("Perth", "Australia/Perth", "Australia"),
    ("Seoul", "Asia/Seoul", "South Korea"),
    ("Tokyo", "Asia/Tokyo", "Japan"),
    ("Adelaide", "Australia/Adelaide", "Australia"),
    ("Brisbane", "Australia/Brisbane", "Australia"),
    ("Sydney", "Australia/Sydney", "Australia"),
    ("Auckland", "Pacific/Auckland", "New Zealand"),
)

DEFAULT_ZONE_KEYS: tuple[str, ...] = (
    "UTC",
    "Europe/London",
    "America/New_York",
    "Asia/Tokyo",
)


def format_offset(offset: timedelta) -> str:
    """Compact UTC offset label: `UTC`, `UTC+1`, `UTC-3:30`, `UTC+5:45`."""
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return "UTC"
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


def _name_from_key(key: str) -> str:
    return key.rsplit("/", 1)[-1].replace("_", " ")


def _normalize(text: str) -> str:
    return " ".join(text.replace("_", " ").split()).casefold()


@dataclass(frozen=True, slots=True)
class ZoneLookupError:
    """A city or key could not be resolved to a single zone."""

    query: str
    message: str
    suggestions: tuple[str, ...] = ()

    @property
    def hint(self) -> str | None:
        if self.suggestions:
            return f"did you mean: {', '.join(self.suggestions)}?"
        return "run `alltz list` to see available timezones"


@dataclass(frozen=True, slots=True)
class TimeZone:
    """A named zone the dashboard renders a row for."""

    name: str
    key: str
    region: str | None = None
    tz: ZoneInfo = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tz", ZoneInfo(self.key))

    @classmethod
    def from_key(cls, key: str, name: str | None = None, region: str | None = None) -> TimeZone:
        """Build a zone from an IANA key; raises ZoneInfoNotFoundError if unknown."""
        return cls(name=name or _name_from_key(key), key=key, region=region)

    def convert_time(self, utc: datetime) -> datetime:
        return utc.astimezone(self.tz)

    def offset_at(self, utc: datetime) -> timedelta:
        return self.convert_time(utc).utcoffset() or timedelta(0)

    def offset_string(self, utc: datetime | None = None) -> str:
        return format_offset(self.offset_at(utc or datetime.now(UTC)))

    def abbreviation(self, utc: datetime | None = None) -> str:
        return self.convert_time(utc or datetime.now(UTC)).tzname() or ""

    def is_dst(self, utc: datetime | None = None) -> bool:
        dst = self.convert_time(utc or datetime.now(UTC)).dst()
        return bool(dst)

    def display_name(self) -> str:
        return self.name

    def full_display_name(self, utc: datetime | None = None) -> str:
        """`London (Europe/London) UTC+1 BST`; the key is omitted when it equals the name."""
        at = utc or datetime.now(UTC)
        parts = [self.name]
        if self.key != self.name:
            parts.append(f"({self.key})")
        offset = self.offset_string(at)
        if offset != self.name:
            parts.append(offset)
        abbr = self.abbreviation(at)
        # zoneinfo reports numeric abbreviations like "+0530" for some zones
        if abbr and abbr != "UTC" and abbr[0] not in "+-":
            parts.append(abbr)
        return " ".join(parts)


class TimezoneRegistry:
    """Resolves user input to TimeZone values."""

    def __init__(self, catalog: tuple[tuple[str, str, str], ...] = CATALOG) -> None:
        self._zones: list[TimeZone] = []
        for name, key, region in catalog:
            try:
                self._zones.append(TimeZone(name=name, key=key, region=region))
            except ZoneInfoNotFoundError:
                # Older tz databases lack some renamed keys (Europe/Kyiv)
                continue

    def all(self, at: datetime | None = None) -> list[TimeZone]:
        """Catalog ordered by current UTC offset, then city name."""
        when = at or datetime.now(UTC)
        return sorted(self._zones, key=lambda z: (z.offset_at(when), z.name))

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, key: object) -> bool:
        return any(z.key == key for z in self._zones)

    def from_key(self, key: str) -> Result[TimeZone, ZoneLookupError]:
        """Catalog entry for `key`, or any valid IANA zone outside the catalog."""
        for zone in self._zones:
            if zone.key == key:
                return Ok(zone)
        try:
            return Ok(TimeZone.from_key(key))
        except (ZoneInfoNotFoundError, ValueError):
            return Err(ZoneLookupError(key, f"Unknown timezone: {key}"))

    def find(self, query: str) -> Result[TimeZone, ZoneLookupError]:
        """Resolve a city name, IANA key or unique prefix to a zone."""
        wanted = _normalize(query)
        if not wanted:
            return Err(ZoneLookupError(query, "Empty timezone name"))

        for matches in (
            lambda z: _normalize(z.name) == wanted,
            lambda z: _normalize(z.key) == wanted,
            lambda z: _normalize(_name_from_key(z.key)) == wanted,
        ):
            found = [z for z in self._zones if matches(z)]
            if found:
                return Ok(found[0])

        prefixed = [z for z in self._zones if _normalize(z.name).startswith(wanted)]
        if len(prefixed) == 1:
            return Ok(prefixed[0])
        if len(prefixed) > 1:
            names = tuple(z.name for z in prefixed)
            return Err(ZoneLookupError(query, f"Ambiguous timezone: {query}", names))

        candidate = query.strip()
        known = available_timezones()
        if "/" not in candidate and candidate.upper() in known:
            candidate = candidate.upper()
        if "/" in candidate or candidate in known:
            result = self.from_key(candidate)
            if isinstance(result, Ok):
                return result

        suggestions = tuple(z.name for z in self._zones if wanted in _normalize(z.name))
        return Err(ZoneLookupError(query, f"Unknown timezone: {query}", suggestions[:5]))

    def local(self) -> TimeZone:
        """The user's local zone, UTC when it cannot be determined."""
        try:
            key = tzlocal.get_localzone_name()
        except (LookupError, ValueError, OSError):
            key = None
        if not key:
            return TimeZone(name="UTC", key="UTC", region="Local")

        for zone in self._zones:
            if zone.key == key:
                return zone
        try:
            return TimeZone.from_key(key)
        except (ZoneInfoNotFoundError, ValueError):
            return TimeZone(name="UTC", key="UTC", region="Local")
