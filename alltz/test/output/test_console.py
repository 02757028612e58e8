"""Tests for console output backends."""

from __future__ import annotations

import pytest

from alltz.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_records_messages_with_prefixes(self) -> None:
        console = MockConsole()
        console.header("Title")
        console.success("done")
        console.error("broken")
        console.warning("careful")
        console.info("fyi")
        console.newline()

        assert console.messages == [
            "Title",
            "OK done",
            "error: broken",
            "warning: careful",
            "info: fyi",
            "",
        ]
        assert console.has_error()
        assert console.has_warning()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("London 13:00", Style.BOLD)
        console.print("Tokyo 21:00")

        found = console.find("Tokyo")
        assert len(found) == 1
        assert found[0].style == Style.DEFAULT
        assert console.text == "London 13:00\nTokyo 21:00"

    def test_no_error_by_default(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert not console.has_error()
        assert not console.has_warning()


class TestRichConsole:
    def test_print_does_not_interpret_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("[bold]Paris[/bold]")
        assert "[bold]Paris[/bold]" in capsys.readouterr().out

    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("Unknown timezone: [x]")
        console.success("added Paris")

        captured = capsys.readouterr()
        assert "error: Unknown timezone: [x]" in captured.err
        assert "OK added Paris" in captured.out
        assert "error" not in captured.out


def test_style_str() -> None:
    assert str(Style.HEADER) == "header"
