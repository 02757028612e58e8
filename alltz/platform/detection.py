"""Operating system detection.

Only the distinctions alltz acts on are modelled: Windows needs its own
config location and console key reader; Linux and macOS share POSIX paths
and termios.
"""

from __future__ import annotations

import sys as _sys
from enum import Enum, auto
from functools import lru_cache

__all__ = ["Platform", "detect_platform", "is_windows"]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    if _sys.platform.startswith("linux"):
        return Platform.LINUX
    if _sys.platform == "darwin":
        return Platform.MACOS
    if _sys.platform in ("win32", "cygwin"):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def is_windows() -> bool:
    return detect_platform() == Platform.WINDOWS
