"""Raw keyboard input for the interactive dashboard.

Keys are reported as short names: printable characters as themselves
(`"h"`, `"H"`, `"?"`), plus `"up"`, `"down"`, `"left"`, `"right"`,
`"enter"`, `"esc"` and `"ctrl-c"`. Reads take a timeout so the caller can
redraw the clock while the user is idle.
"""

from __future__ import annotations

import os
import sys
import time
from types import TracebackType

__all__ = ["KeyReader", "is_interactive_terminal", "decode_escape"]

_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_WIN_ARROWS = {"H": "up", "P": "down", "K": "left", "M": "right"}


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def decode_escape(sequence: str) -> str:
    """Name for a POSIX escape sequence starting after the ESC byte."""
    if len(sequence) >= 2 and sequence[0] in "[O":
        return _ARROWS.get(sequence[1], "other")
    return "esc"


def _name_for(ch: str) -> str:
    if ch in ("\r", "\n"):
        return "enter"
    if ch == "\x03":
        return "ctrl-c"
    return ch


class KeyReader:
    """Puts the terminal in cbreak mode for its lifetime and reads keys.

    Use as a context manager; the previous terminal mode is always restored.
    """

    def __init__(self) -> None:
        self._fd: int | None = None
        self._saved: list[object] | None = None

    def __enter__(self) -> KeyReader:
        if os.name != "nt":
            import termios
            import tty

            self._fd = sys.stdin.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._fd is not None and self._saved is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None

    def read(self, timeout: float) -> str | None:
        """Next key name, or None if nothing was pressed within `timeout` seconds."""
        if os.name == "nt":
            return self._read_windows(timeout)
        return self._read_posix(timeout)

    def _read_posix(self, timeout: float) -> str | None:
        import select

        fd = self._fd if self._fd is not None else sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        ch = os.read(fd, 1).decode("utf-8", errors="replace")
        if ch != "\x1b":
            return _name_for(ch)

        sequence = ""
        while len(sequence) < 2:
            ready, _, _ = select.select([fd], [], [], 0.03)
            if not ready:
                break
            sequence += os.read(fd, 1).decode("utf-8", errors="replace")
        return decode_escape(sequence)

    def _read_windows(self, timeout: float) -> str | None:
        import msvcrt

        deadline = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.02)
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WIN_ARROWS.get(msvcrt.getwch(), "other")
        if ch == "\x1b":
            return "esc"
        return _name_for(ch)
