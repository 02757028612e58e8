"""Daylight-saving transition detection.

Transitions are found by watching the UTC offset change, not by asking the
tz database for its rule table, so the same code covers DST, permanent
offset changes and zones with no DST at all.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum

from .zones import TimeZone

__all__ = [
    "DstTransition",
    "detect_transition",
    "next_transition",
    "transitions_in_range",
]

_STEP = timedelta(hours=1)
_RESOLUTION = timedelta(minutes=1)


class DstTransition(Enum):
    """Direction of a clock change."""

    SPRING_FORWARD = "spring_forward"  # offset grows, 02:00 -> 03:00
    FALL_BACK = "fall_back"  # offset shrinks, 02:00 -> 01:00

    def __str__(self) -> str:
        return "spring forward" if self is DstTransition.SPRING_FORWARD else "fall back"

    @property
    def symbol(self) -> str:
        return "⇈" if self is DstTransition.SPRING_FORWARD else "⇊"


def _kind(before: timedelta, after: timedelta) -> DstTransition | None:
    if after > before:
        return DstTransition.SPRING_FORWARD
    if after < before:
        return DstTransition.FALL_BACK
    return None


def detect_transition(zone: TimeZone, utc: datetime) -> DstTransition | None:
    """Kind of clock change between `utc` and one hour later, if any."""
    return _kind(zone.offset_at(utc), zone.offset_at(utc + _STEP))


def _refine(zone: TimeZone, lo: datetime, hi: datetime) -> datetime:
    """First instant in (lo, hi] carrying hi's offset, to the minute."""
    before = zone.offset_at(lo)
    while hi - lo > _RESOLUTION:
        mid = lo + (hi - lo) / 2
        if zone.offset_at(mid) == before:
            lo = mid
        else:
            hi = mid
    floor = hi.replace(second=0, microsecond=0)
    if floor > lo and zone.offset_at(floor) != before:
        return floor
    return hi


def transitions_in_range(
    zone: TimeZone, start: datetime, end: datetime
) -> list[tuple[datetime, DstTransition]]:
    """Clock changes in `[start, end)`, scanned hourly.

    Returned instants are UTC and exact to the minute.
    """
    found: list[tuple[datetime, DstTransition]] = []
    current = start
    while current < end:
        kind = detect_transition(zone, current)
        if kind is not None:
            at = _refine(zone, current, current + _STEP)
            if at < end:
                found.append((at, kind))
        current += _STEP
    return found


def next_transition(
    zone: TimeZone, after: datetime, horizon_days: int = 366
) -> tuple[datetime, DstTransition] | None:
    """The first clock change after `after` within the horizon, or None."""
    day = timedelta(days=1)
    lo = after
    for _ in range(horizon_days):
        hi = lo + day
        kind = _kind(zone.offset_at(lo), zone.offset_at(hi))
        if kind is not None:
            return _refine(zone, lo, hi), kind
        lo = hi
    return None
