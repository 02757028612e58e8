"""End-to-end tests through the typer app."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from alltz import __version__
from alltz.cli.app import app
from alltz.core.errors import ErrorCode
from alltz.platform.paths import CONFIG_ENV_VAR, clear_caches

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    path = tmp_path / "config.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    clear_caches()
    yield path
    clear_caches()


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"alltz {__version__}" in result.output
    assert "alltz 0.1.0" in result.output


def test_list() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Available Timezones" in result.output


def test_time_london() -> None:
    result = runner.invoke(app, ["time", "London"])
    assert result.exit_code == 0
    assert "Current time" in result.output


def test_zone_unknown_city() -> None:
    result = runner.invoke(app, ["zone", "Atlantis"])
    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_dashboard_needs_tty() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_config_option(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"
    result = runner.invoke(app, ["--config", str(custom), "add", "Tokyo"])
    assert result.exit_code == 0
    assert custom.exists()
    assert "Asia/Tokyo" in custom.read_text(encoding="utf-8")


def test_invalid_config_file_is_env_error(isolated_config: Path) -> None:
    isolated_config.write_text("timezones = [\n", encoding="utf-8")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == int(ErrorCode.ENV_ERROR)
