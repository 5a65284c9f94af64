"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DeployDefaults,
    LoadConfig,
    ReadBlendSettings,
    ShowConfig,
    StartLogging,
)

__all__ = [
    "DeployDefaults",
    "LoadConfig",
    "ReadBlendSettings",
    "ShowConfig",
    "StartLogging",
]
