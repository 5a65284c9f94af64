"""Command-line interface: the ``portmanteau`` group, its commands and entry point.

Contents:
    * :func:`.root.cli` - Root command group
    * :func:`.main.main` - Entry point returning an exit code
    * :mod:`.commands` - ``blend``, ``config``, ``config-deploy`` and ``info``
    * :mod:`.context` - State shared with subcommands
    * :mod:`.tracebacks` - The ``--traceback`` switch
"""

from __future__ import annotations

from .commands import cli_blend, cli_config, cli_config_deploy, cli_info
from .constants import CLICK_CONTEXT_SETTINGS, STDIN_MARKER
from .context import CLIContext, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli
from .tracebacks import enable_tracebacks, preserved_traceback_flags, tracebacks_enabled

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "STDIN_MARKER",
    "CLIContext",
    "ExitCode",
    "cli",
    "cli_blend",
    "cli_config",
    "cli_config_deploy",
    "cli_info",
    "enable_tracebacks",
    "get_cli_context",
    "main",
    "preserved_traceback_flags",
    "tracebacks_enabled",
]
