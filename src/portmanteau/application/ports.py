"""Callable ports the CLI reaches its adapters through.

A plain function whose signature matches ``__call__`` satisfies a port, so
production adapters and in-memory doubles need no base class.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import BlendSettings


class LoadConfig(Protocol):
    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class ReadBlendSettings(Protocol):
    """Turn the ``[portmanteau]`` section into validated settings."""

    def __call__(self, config: Config) -> BlendSettings: ...


class StartLogging(Protocol):
    def __call__(self, config: Config) -> None: ...


class ShowConfig(Protocol):
    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class DeployDefaults(Protocol):
    """Write the bundled defaults to configuration layers; return written paths."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
    ) -> list[Path]: ...


__all__ = [
    "DeployDefaults",
    "LoadConfig",
    "ReadBlendSettings",
    "ShowConfig",
    "StartLogging",
]
