"""Tests for alltz.platform.detection module."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from alltz.platform import detection
from alltz.platform.detection import Platform, detect_platform, is_windows


@pytest.fixture(autouse=True)
def fresh_detection() -> Iterator[None]:
    detect_platform.cache_clear()
    yield
    detect_platform.cache_clear()


@pytest.mark.parametrize(
    ("sys_platform", "expected"),
    [
        ("linux", Platform.LINUX),
        ("darwin", Platform.MACOS),
        ("win32", Platform.WINDOWS),
        ("cygwin", Platform.WINDOWS),
        ("sunos5", Platform.UNKNOWN),
    ],
)
def test_detect_platform(
    monkeypatch: pytest.MonkeyPatch, sys_platform: str, expected: Platform
) -> None:
    monkeypatch.setattr(detection._sys, "platform", sys_platform)
    assert detect_platform() is expected


def test_is_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(detection._sys, "platform", "win32")
    assert is_windows()
    detect_platform.cache_clear()
    monkeypatch.setattr(detection._sys, "platform", "darwin")
    assert not is_windows()
