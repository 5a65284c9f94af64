"""CLI command implementations.

Contents:
    * Blend command from :mod:`.blend_cmd`
    * Config commands from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .blend_cmd import cli_blend
from .config import cli_config, cli_config_deploy
from .info import cli_info

__all__ = [
    "cli_blend",
    "cli_config",
    "cli_config_deploy",
    "cli_info",
]
