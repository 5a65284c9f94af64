"""Shared CLI constants."""

from __future__ import annotations

from typing import Final

#: ``-h`` as well as ``--help`` on every command.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Positional argument that makes ``blend`` read word pairs from stdin.
STDIN_MARKER: Final[str] = "-"

__all__ = ["CLICK_CONTEXT_SETTINGS", "STDIN_MARKER"]
