"""User-level paths for alltz.

The config lives in a per-user directory:

  ~/.config/alltz/config.toml        (Linux/macOS, honours XDG_CONFIG_HOME)
  %APPDATA%\alltz\config.toml        (Windows)

`ALLTZ_CONFIG` points at an explicit file and wins over both.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import is_windows

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "clear_caches",
    "config_file",
    "home",
    "user_config_dir",
]

APP_NAME = "alltz"
CONFIG_ENV_VAR = "ALLTZ_CONFIG"


@lru_cache(maxsize=1)
def home() -> Path:
    """User home directory, preferring HOME/USERPROFILE when set."""
    env = os.environ.get("USERPROFILE" if is_windows() else "HOME")
    if env:
        return Path(env)
    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    if is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


def config_file(override: Path | None = None) -> Path:
    """Resolve the config file path: explicit override, env var, then default."""
    if override is not None:
        return override.expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return user_config_dir() / "config.toml"


def clear_caches() -> None:
    """Forget cached directories (tests change env vars between cases)."""
    home.cache_clear()
    user_config_dir.cache_clear()
