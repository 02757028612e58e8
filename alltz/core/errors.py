"""Exit codes shared by every alltz command.

The numeric values are part of the CLI contract and should remain stable:
- 0: Success
- 1: User error (unknown city, bad option value)
- 2: Environment error (no TTY, unreadable config)
- 5: I/O error (config could not be written)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes for alltz."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
