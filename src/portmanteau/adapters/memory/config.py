"""Configuration doubles: a fixed in-memory Config, a silent display, no deploys."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat
from ..config.settings import SETTINGS_SECTION, BlendSettings


def default_sections() -> dict[str, Mapping[str, Any]]:
    """The ``[portmanteau]`` section as ``defaultconfig.toml`` ships it.

    Example:
        >>> default_sections()["portmanteau"]["vowel_policy"]
        'strict'
    """
    return {SETTINGS_SECTION: BlendSettings().model_dump(mode="json")}


def load_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the default blend settings; no file or environment is read."""
    return Config(default_sections(), {})


def show_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    pass


def deploy_defaults_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Report that nothing was written, as if every target already existed."""
    return []


__all__ = [
    "default_sections",
    "deploy_defaults_in_memory",
    "load_config_in_memory",
    "show_config_in_memory",
]
