"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - Layered loading with caching and profiles
    * :mod:`.settings` - ``[portmanteau]`` section model
    * :mod:`.deploy` - Copying the defaults into a layer
    * :mod:`.display` - Human/JSON rendering
    * :mod:`.overrides` - ``--set`` override parsing and application
"""

from __future__ import annotations

from .deploy import deploy_defaults
from .display import display_config
from .loader import DEFAULT_CONFIG_FILE, clear_config_cache, get_config
from .overrides import apply_overrides
from .settings import BlendSettings, load_blend_settings

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "BlendSettings",
    "apply_overrides",
    "clear_config_cache",
    "deploy_defaults",
    "display_config",
    "get_config",
    "load_blend_settings",
]
