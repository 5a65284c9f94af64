"""The ``portmanteau`` command group.

The group callback does the work every subcommand shares: build the
services, read configuration (profile and ``--set`` included), start
logging, then leave a :class:`~.context.CLIContext` in ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from portmanteau import __init__conf__
from portmanteau.adapters.config.overrides import apply_overrides

from .commands import cli_blend, cli_config, cli_config_deploy, cli_info
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext
from .tracebacks import enable_tracebacks

if TYPE_CHECKING:
    from portmanteau.composition import AppServices


def _bootstrap(ctx: click.Context, profile: str | None, set_overrides: tuple[str, ...]) -> CLIContext:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()

    config = services.load_config(profile=profile)
    try:
        config = apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    services.start_logging(config)
    return CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback of unexpected errors")
@click.option("--profile", default=None, metavar="NAME", help="Read the profile/NAME variant of every config layer")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run (repeatable), e.g. portmanteau.vowel_policy=relaxed",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    enable_tracebacks(traceback)
    ctx.obj = _bootstrap(ctx, profile, set_overrides)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_blend, cli_config, cli_config_deploy, cli_info):
    cli.add_command(_command)


__all__ = ["cli"]
