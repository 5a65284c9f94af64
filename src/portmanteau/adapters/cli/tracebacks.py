"""The ``--traceback`` switch, kept in ``lib_cli_exit_tools.config``.

lib_cli_exit_tools reads these flags when it formats an uncaught exception,
so the root group sets them and :func:`~.main.main` puts them back.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import lib_cli_exit_tools


def tracebacks_enabled() -> bool:
    return bool(getattr(lib_cli_exit_tools.config, "traceback", False))


def enable_tracebacks(enabled: bool) -> None:
    """Show full, coloured tracebacks when *enabled*; one-line summaries otherwise.

    Example:
        >>> with preserved_traceback_flags():
        ...     enable_tracebacks(True)
        ...     state = tracebacks_enabled()
        >>> state
        True
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def preserved_traceback_flags(restore: bool = True) -> Iterator[None]:
    """Put both traceback flags back on exit unless *restore* is False."""
    config = lib_cli_exit_tools.config
    saved = (config.traceback, config.traceback_force_color)
    try:
        yield
    finally:
        if restore:
            config.traceback, config.traceback_force_color = saved


__all__ = ["enable_tracebacks", "preserved_traceback_flags", "tracebacks_enabled"]
