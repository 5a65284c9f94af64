"""Run the root group and turn whatever happens into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from portmanteau import __init__conf__

from .tracebacks import preserved_traceback_flags

if TYPE_CHECKING:
    from portmanteau.composition import AppServices


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the root group with *services_factory* as ``ctx.obj``.

    ``lib_cli_exit_tools.run_cli`` has no way to pass ``obj``, so the group is
    invoked directly and failures go through ``handle_cli_exception``, which
    maps ``SystemExit``, Click errors and signals to their codes and renders
    anything else.
    """
    from .root import cli

    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except BaseException as exc:
        return lib_cli_exit_tools.handle_cli_exception(exc)
    # Without standalone mode, --help and --version return their code.
    return outcome if isinstance(outcome, int) else 0


def _shutdown_logging() -> None:
    # The runtime is process-wide; a worker thread must not stop it.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI for the console script and ``python -m portmanteau``.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Undo ``--traceback`` once the command finished.
        services_factory: Builds the :class:`AppServices`; entry points pass
            ``build_production``.

    Returns:
        The exit code, see :class:`~.exit_codes.ExitCode`.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from portmanteau.composition import build_production
        >>> main(["blend", "fluffy", "turtle"], services_factory=build_production)  # doctest: +SKIP
        flurtle
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        with preserved_traceback_flags(restore=restore_traceback):
            return _invoke(args, services_factory)
    finally:
        _shutdown_logging()


__all__ = ["main"]
