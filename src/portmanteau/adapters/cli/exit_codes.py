"""Exit codes for CLI error paths.

The low codes keep the historical meaning of the ``portmanteau`` tool
(1 = nothing blended, 2 = user error, 3 = program error); configuration
commands use sysexits/errno-style codes.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the ``portmanteau`` CLI.

    Example:
        >>> int(ExitCode.NO_PORTMANTEAU)
        1
        >>> ExitCode.USAGE_ERROR
        <ExitCode.USAGE_ERROR: 2>
    """

    SUCCESS = 0
    NO_PORTMANTEAU = 1
    USAGE_ERROR = 2
    INPUT_ERROR = 3
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
