"""Platform helpers (OS detection, user directories)."""

from .detection import Platform, detect_platform, is_windows
from .paths import config_file, home, user_config_dir

__all__ = [
    "Platform",
    "detect_platform",
    "is_windows",
    "config_file",
    "home",
    "user_config_dir",
]
