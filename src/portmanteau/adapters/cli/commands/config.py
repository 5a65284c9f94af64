"""The ``config`` and ``config-deploy`` commands.

Contents:
    * :func:`cli_config` - Show the merged configuration.
    * :func:`cli_config_deploy` - Copy the bundled defaults into a layer.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from portmanteau.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_profile_option = click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Use this profile instead of the one given to portmanteau",
)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (default) or json",
)
@click.option("--section", default=None, help="Only show this section, e.g. portmanteau")
@_profile_option
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration blend and logging actually use.

    Layers are merged in this order, later ones winning: bundled defaults,
    app, host, user, .env, environment, then --set.
    """
    cli_ctx = get_cli_context(ctx)
    config, active_profile = cli_ctx.config_for(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "format": fmt.value}):
        logger.info("Displaying configuration", extra={"section": section, "profile": active_profile})
        click.echo()
        try:
            cli_ctx.services.show_config(config, output_format=fmt, section=section, profile=active_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _report(written: list[Path], profile: str | None) -> None:
    if not written:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    suffix = f" (profile: {profile})" if profile else ""
    click.echo(f"\nConfiguration deployed successfully{suffix}:")
    for path in written:
        click.echo(f"  ✓ {path}")


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Layer to write to; repeat for several",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite files that already exist")
@_profile_option
@click.pass_context
def cli_config_deploy(ctx: click.Context, targets: tuple[str, ...], force: bool, profile: str | None) -> None:
    r"""Copy the default configuration into a layer you can edit.

    \b
    - user: your own settings (~/.config/portmanteau on Linux)
    - host: this machine, all users (needs root)
    - app:  system-wide application defaults (needs root)
    """
    cli_ctx = get_cli_context(ctx)
    active_profile = profile or cli_ctx.profile
    layers = [DeployTarget(t.lower()) for t in targets]

    extra = {"command": "config-deploy", "targets": [layer.value for layer in layers], "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        logger.info("Deploying configuration", extra={"profile": active_profile})
        try:
            written = cli_ctx.services.deploy_defaults(targets=layers, force=force, profile=active_profile)
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            click.echo(f"\nError: Permission denied. {exc}", err=True)
            click.echo("Hint: --target app and --target host usually need sudo.", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except ValueError as exc:
            logger.error("Invalid deployment request", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        _report(written, active_profile)


__all__ = ["cli_config", "cli_config_deploy"]
