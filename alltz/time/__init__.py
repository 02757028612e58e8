"""Timezone catalog and DST detection."""

from .dst import DstTransition, detect_transition, next_transition, transitions_in_range
from .zones import (
    CATALOG,
    DEFAULT_ZONE_KEYS,
    TimeZone,
    TimezoneRegistry,
    ZoneLookupError,
    format_offset,
)

__all__ = [
    # zones
    "CATALOG",
    "DEFAULT_ZONE_KEYS",
    "TimeZone",
    "TimezoneRegistry",
    "ZoneLookupError",
    "format_offset",
    # dst
    "DstTransition",
    "detect_transition",
    "next_transition",
    "transitions_in_range",
]
