"""Tests for alltz.ui.dashboard module."""

from __future__ import annotations

import io
from datetime import UTC, datetime, timedelta

from rich.console import Console

from alltz.app.state import AppState
from alltz.time.zones import TimeZone
from alltz.ui.dashboard import header_text, render_dashboard, rows_for

NOW = datetime(2024, 7, 15, 12, 0, tzinfo=UTC)
LONDON = TimeZone(name="London", key="Europe/London")
TOKYO = TimeZone(name="Tokyo", key="Asia/Tokyo")


def _state() -> AppState:
    return AppState(zones=[LONDON, TOKYO], current_time=NOW, local_zone=LONDON)


def _render(state: AppState, width: int = 100) -> str:
    console = Console(file=io.StringIO(), width=width, record=True, color_system=None)
    console.print(render_dashboard(state, width))
    return console.export_text()


def test_header_shows_local_scrubbed_time() -> None:
    state = _state()
    assert "London: 13:00 Mon 15 Jul 2024 (UTC+1)" in header_text(state).plain
    assert "[now]" in header_text(state).plain

    state.scrub(timedelta(hours=3))
    plain = header_text(state).plain
    assert "London: 16:00 Mon 15 Jul 2024" in plain
    assert "[+3h]" in plain


def test_rows_follow_state() -> None:
    state = _state()
    state.select_next()
    rows = rows_for(state)
    assert [r.zone.name for r in rows] == ["London", "Tokyo"]
    assert [r.selected for r in rows] == [False, True]
    assert all(r.timeline_position == NOW for r in rows)


def test_render_contains_every_zone() -> None:
    text = _render(_state())
    assert "London UTC+1" in text
    assert "Tokyo UTC+9" in text
    assert "13:00 Mon" in text
    assert "21:00 Mon" in text
    assert "?: help" in text


def test_help_replaces_rows() -> None:
    state = _state()
    state.toggle_help()
    text = _render(state)
    assert "Help" in text
    assert "scrub one hour" in text
    assert "Tokyo UTC+9" not in text


def test_narrow_terminal_does_not_crash() -> None:
    text = _render(_state(), width=12)
    assert "alltz" in text
