"""In-memory doubles for the ports that touch files or the logging runtime.

Contents:
    * :mod:`.config` - Configuration load, display and deploy doubles
    * :mod:`.logging` - Logging start-up double
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import default_sections, deploy_defaults_in_memory, load_config_in_memory, show_config_in_memory
from .logging import start_logging_in_memory

if TYPE_CHECKING:
    from portmanteau.application.ports import DeployDefaults, LoadConfig, ShowConfig, StartLogging

    _load_config: LoadConfig = load_config_in_memory
    _show_config: ShowConfig = show_config_in_memory
    _deploy_defaults: DeployDefaults = deploy_defaults_in_memory
    _start_logging: StartLogging = start_logging_in_memory

__all__ = [
    "default_sections",
    "deploy_defaults_in_memory",
    "load_config_in_memory",
    "show_config_in_memory",
    "start_logging_in_memory",
]
