"""POSIX-conventional exit codes for CLI paths.

Signal codes are informational only; ``lib_cli_exit_tools`` performs the
signal-to-exit-code translation itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application.

    * 0–1: generic success / failure
    * 2: click usage error
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
