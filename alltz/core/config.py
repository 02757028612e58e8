"""Persistent user configuration.

The config is a small TOML file:

    timezones = ["Europe/London", "America/New_York", "Asia/Tokyo"]

    [display]
    time_format = "24h"
    display_mode = "short"
    theme = "ocean"
    show_date = false

    [hours]
    work_start = 8
    work_end = 18
    awake_start = 6
    awake_end = 22

Every key is optional; missing or malformed values fall back to defaults.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .display import ColorTheme, DisplayMode, TimeDisplayConfig, TimeFormat
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "save_config",
    "render_config",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Config could not be read or written."""

    message: str
    path: Path | None = None
    hint: str | None = None


def _enum_value[T: (TimeFormat, DisplayMode, ColorTheme)](
    cls: type[T], raw: str | None, default: T, name: str, warnings: list[str]
) -> T:
    if raw is None:
        return default
    try:
        return cls(raw.lower())
    except ValueError:
        allowed = ", ".join(m.value for m in cls)
        warnings.append(f"ignoring {name} = {raw!r} (expected one of: {allowed})")
        return default


@dataclass(frozen=True, slots=True)
class Config:
    """User preferences restored at startup.

    `timezones` holds IANA keys; an empty tuple means "use the defaults".
    `warnings` collects values that were ignored while parsing.
    """

    timezones: tuple[str, ...] = ()
    time_format: TimeFormat = TimeFormat.TWENTY_FOUR_HOUR
    display_mode: DisplayMode = DisplayMode.SHORT
    theme: ColorTheme = ColorTheme.DEFAULT
    show_date: bool = False
    hours: TimeDisplayConfig = field(default_factory=TimeDisplayConfig)
    warnings: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        warnings: list[str] = []
        display: StrDict = get_table(data, "display") or {}
        hours_table: StrDict = get_table(data, "hours") or {}

        defaults = TimeDisplayConfig()
        hours = TimeDisplayConfig(
            work_hours_start=_or(get_int(hours_table, "work_start"), defaults.work_hours_start),
            work_hours_end=_or(get_int(hours_table, "work_end"), defaults.work_hours_end),
            awake_hours_start=_or(get_int(hours_table, "awake_start"), defaults.awake_hours_start),
            awake_hours_end=_or(get_int(hours_table, "awake_end"), defaults.awake_hours_end),
        )
        if not hours.is_valid():
            warnings.append("ignoring [hours]: need awake_start <= work_start < work_end <= awake_end")
            hours = defaults

        timezones = get_str_list(data, "timezones") or []
        show_date = get_bool(display, "show_date")

        return cls(
            timezones=tuple(dict.fromkeys(timezones)),
            time_format=_enum_value(
                TimeFormat,
                get_str(display, "time_format"),
                TimeFormat.TWENTY_FOUR_HOUR,
                "time_format",
                warnings,
            ),
            display_mode=_enum_value(
                DisplayMode,
                get_str(display, "display_mode"),
                DisplayMode.SHORT,
                "display_mode",
                warnings,
            ),
            theme=_enum_value(
                ColorTheme, get_str(display, "theme"), ColorTheme.DEFAULT, "theme", warnings
            ),
            show_date=show_date if show_date is not None else False,
            hours=hours,
            warnings=tuple(warnings),
        )

    def with_timezones(self, keys: list[str] | tuple[str, ...]) -> Config:
        return replace(self, timezones=tuple(dict.fromkeys(keys)))


def _or(value: int | None, default: int) -> int:
    return default if value is None else value


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(
            ConfigError(
                f"Invalid TOML syntax in {path}: {e}",
                path=path,
                hint="fix or delete the file to start from defaults",
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from a TOML file."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config."""
    if not path.exists():
        return Ok(Config())
    return load_config(path)


def _toml_str(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes
    return json.dumps(value, ensure_ascii=False)


def render_config(config: Config) -> str:
    """Serialize `config` in the layout documented at the top of this module."""
    zones = ", ".join(_toml_str(k) for k in config.timezones)
    hours = config.hours
    lines = [
        f"timezones = [{zones}]",
        "",
        "[display]",
        f"time_format = {_toml_str(config.time_format.value)}",
        f"display_mode = {_toml_str(config.display_mode.value)}",
        f"theme = {_toml_str(config.theme.value)}",
        f"show_date = {'true' if config.show_date else 'false'}",
        "",
        "[hours]",
        f"work_start = {hours.work_hours_start}",
        f"work_end = {hours.work_hours_end}",
        f"awake_start = {hours.awake_hours_start}",
        f"awake_end = {hours.awake_hours_end}",
    ]
    return "\n".join(lines) + "\n"


def save_config(config: Config, path: Path) -> Result[None, ConfigError]:
    """Write `config` to `path`, replacing any previous file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(ConfigError(f"Could not create {path.parent}: {e}", path=path))

    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(render_config(config), encoding="utf-8", newline="\n")
        tmp.replace(path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        return Err(ConfigError(f"Could not write {path}: {e}", path=path))
    return Ok(None)
