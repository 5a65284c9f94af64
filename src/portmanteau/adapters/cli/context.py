"""Per-invocation state the root group hands to every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from portmanteau.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from portmanteau.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Loaded configuration plus what is needed to load it again.

    Attributes:
        config: Configuration with the root ``--set`` overrides applied.
        services: Port implementations from the composition layer.
        profile: Profile chosen on the root command.
        set_overrides: Raw ``--set`` strings, kept for :meth:`config_for`.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Configuration and profile a subcommand's own ``--profile`` selects.

        Without *profile* the root configuration is reused. Otherwise that
        profile is loaded and the root ``--set`` overrides applied on top.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.load_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored in ``ctx.obj``.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; run commands through the root group.")
    return ctx.obj


__all__ = ["CLIContext", "get_cli_context"]
