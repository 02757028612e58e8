"""Tests for alltz.time.zones module."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from alltz.core.result import Err, Ok
from alltz.time.zones import TimeZone, TimezoneRegistry, format_offset

SUMMER = datetime(2024, 7, 15, 12, 0, tzinfo=UTC)
WINTER = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="module")
def registry() -> TimezoneRegistry:
    return TimezoneRegistry()


class TestFormatOffset:
    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (timedelta(0), "UTC"),
            (timedelta(hours=1), "UTC+1"),
            (timedelta(hours=-5), "UTC-5"),
            (timedelta(hours=5, minutes=30), "UTC+5:30"),
            (timedelta(hours=-3, minutes=-30), "UTC-3:30"),
            (timedelta(hours=5, minutes=45), "UTC+5:45"),
        ],
    )
    def test_format(self, offset: timedelta, expected: str) -> None:
        assert format_offset(offset) == expected


class TestTimeZone:
    def test_convert_and_offset(self) -> None:
        london = TimeZone(name="London", key="Europe/London")
        assert london.convert_time(SUMMER).hour == 13
        assert london.offset_string(SUMMER) == "UTC+1"
        assert london.offset_string(WINTER) == "UTC"
        assert london.is_dst(SUMMER) is True
        assert london.is_dst(WINTER) is False

    def test_full_display_name(self) -> None:
        london = TimeZone(name="London", key="Europe/London")
        assert london.full_display_name(SUMMER) == "London (Europe/London) UTC+1 BST"

    def test_full_display_name_skips_numeric_abbreviation(self) -> None:
        kathmandu = TimeZone(name="Kathmandu", key="Asia/Kathmandu")
        assert kathmandu.full_display_name(SUMMER) == "Kathmandu (Asia/Kathmandu) UTC+5:45"

    def test_full_display_name_for_utc(self) -> None:
        assert TimeZone(name="UTC", key="UTC").full_display_name(SUMMER) == "UTC"

    def test_from_key_derives_name(self) -> None:
        zone = TimeZone.from_key("America/Argentina/Buenos_Aires")
        assert zone.name == "Buenos Aires"

    def test_equality_ignores_zoneinfo_instance(self) -> None:
        assert TimeZone(name="Tokyo", key="Asia/Tokyo") == TimeZone(name="Tokyo", key="Asia/Tokyo")


class TestRegistryFind:
    @pytest.mark.parametrize(
        ("query", "key"),
        [
            ("London", "Europe/London"),
            ("london", "Europe/London"),
            ("  NEW   york ", "America/New_York"),
            ("New_York", "America/New_York"),
            ("America/New_York", "America/New_York"),
            ("Kolkata", "Asia/Kolkata"),
            ("Mumbai", "Asia/Kolkata"),
            ("syd", "Australia/Sydney"),
            ("utc", "UTC"),
        ],
    )
    def test_resolves(self, registry: TimezoneRegistry, query: str, key: str) -> None:
        result = registry.find(query)
        assert isinstance(result, Ok)
        assert result.value.key == key

    def test_outside_catalog_iana_key(self, registry: TimezoneRegistry) -> None:
        result = registry.find("America/Lima")
        assert isinstance(result, Ok)
        assert result.value.name == "Lima"
        assert "America/Lima" not in registry

    def test_ambiguous_prefix(self, registry: TimezoneRegistry) -> None:
        result = registry.find("Lo")
        assert isinstance(result, Err)
        assert "Ambiguous" in result.error.message
        assert set(result.error.suggestions) == {"London", "Los Angeles"}
        assert result.error.hint is not None and "London" in result.error.hint

    def test_unknown(self, registry: TimezoneRegistry) -> None:
        result = registry.find("Atlantis")
        assert isinstance(result, Err)
        assert result.error.message == "Unknown timezone: Atlantis"
        assert result.error.hint == "run `alltz list` to see available timezones"

    def test_unknown_iana_like_key(self, registry: TimezoneRegistry) -> None:
        assert isinstance(registry.find("Mars/Olympus_Mons"), Err)

    def test_empty(self, registry: TimezoneRegistry) -> None:
        assert isinstance(registry.find("   "), Err)


class TestRegistry:
    def test_all_sorted_by_offset(self, registry: TimezoneRegistry) -> None:
        zones = registry.all(WINTER)
        offsets = [z.offset_at(WINTER) for z in zones]
        assert offsets == sorted(offsets)
        assert zones[0].key == "Pacific/Honolulu"
        assert zones[-1].key == "Pacific/Auckland"

    def test_catalog_size(self, registry: TimezoneRegistry) -> None:
        assert len(registry) >= 50

    def test_from_key(self, registry: TimezoneRegistry) -> None:
        result = registry.from_key("Asia/Tokyo")
        assert isinstance(result, Ok)
        assert result.value.name == "Tokyo"
        assert result.value.region == "Japan"
        assert isinstance(registry.from_key("Not/AZone"), Err)

    def test_local_uses_tzlocal(
        self, registry: TimezoneRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import alltz.time.zones as zones_mod

        monkeypatch.setattr(zones_mod.tzlocal, "get_localzone_name", lambda: "Europe/Paris")
        assert registry.local().name == "Paris"

    def test_local_falls_back_to_utc(
        self, registry: TimezoneRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import alltz.time.zones as zones_mod

        def broken() -> str:
            raise LookupError("no zone")

        monkeypatch.setattr(zones_mod.tzlocal, "get_localzone_name", broken)
        assert registry.local().key == "UTC"
