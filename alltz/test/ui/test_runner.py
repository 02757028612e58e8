"""Tests for alltz.ui.runner module."""

from __future__ import annotations

import io
from collections.abc import Iterator
from datetime import UTC, datetime
from types import TracebackType

import pytest
from rich.console import Console

import alltz.ui.runner as runner
from alltz.app.state import AppState
from alltz.core.display import ColorTheme
from alltz.time.zones import TimeZone

LONDON = TimeZone(name="London", key="Europe/London")


class FakeKeyReader:
    """Replays `keys`; a BaseException entry is raised instead of returned."""

    def __init__(self, keys: list[str | BaseException]) -> None:
        self._keys: Iterator[str | BaseException] = iter(keys)

    def __enter__(self) -> FakeKeyReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None

    def read(self, timeout: float) -> str | None:
        key = next(self._keys)
        if isinstance(key, BaseException):
            raise key
        return key


def _run(monkeypatch: pytest.MonkeyPatch, keys: list[str | BaseException]) -> AppState:
    monkeypatch.setattr(runner, "KeyReader", lambda: FakeKeyReader(keys))
    state = AppState(zones=[LONDON], current_time=datetime(2024, 7, 15, 12, 0, tzinfo=UTC))
    console = Console(file=io.StringIO(), width=80, color_system=None)
    result = runner.run_dashboard(state, console)
    assert result is state
    return result


def test_quit_key_returns_state(monkeypatch: pytest.MonkeyPatch) -> None:
    state = _run(monkeypatch, ["c", "q"])
    assert state.theme is ColorTheme.OCEAN
    assert state.dirty


def test_ctrl_c_interrupt_quits_like_q(monkeypatch: pytest.MonkeyPatch) -> None:
    state = _run(monkeypatch, ["c", KeyboardInterrupt()])
    assert state.theme is ColorTheme.OCEAN
    assert state.dirty


def test_unmapped_keys_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    state = _run(monkeypatch, ["l", "unmapped", "q"])
    assert state.is_scrubbed
