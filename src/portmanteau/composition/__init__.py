"""Wire adapters to the ports the CLI depends on.

``build_production`` is what the console script runs with;
``build_testing`` swaps every adapter that touches files or the logging
runtime for an in-memory double.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.deploy import deploy_defaults
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_blend_settings
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DeployDefaults, LoadConfig, ReadBlendSettings, ShowConfig, StartLogging

    _load_config: LoadConfig = get_config
    _blend_settings: ReadBlendSettings = load_blend_settings
    _start_logging: StartLogging = init_logging
    _show_config: ShowConfig = display_config
    _deploy_defaults: DeployDefaults = deploy_defaults


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the root command as ``ctx.obj``."""

    load_config: LoadConfig
    blend_settings: ReadBlendSettings
    start_logging: StartLogging
    show_config: ShowConfig
    deploy_defaults: DeployDefaults


def build_production() -> AppServices:
    return AppServices(
        load_config=get_config,
        blend_settings=load_blend_settings,
        start_logging=init_logging,
        show_config=display_config,
        deploy_defaults=deploy_defaults,
    )


def build_testing() -> AppServices:
    from ..adapters import memory

    return AppServices(
        load_config=memory.load_config_in_memory,
        blend_settings=load_blend_settings,
        start_logging=memory.start_logging_in_memory,
        show_config=memory.show_config_in_memory,
        deploy_defaults=memory.deploy_defaults_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
