"""Copy the bundled defaults into a configuration layer for editing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction, DeployResult

from portmanteau import __init__conf__
from portmanteau.adapters.config.loader import DEFAULT_CONFIG_FILE, validate_profile
from portmanteau.domain.enums import DeployTarget

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def _written_paths(results: Iterable[DeployResult]) -> list[Path]:
    """Flatten deploy results, ``.d`` companions included, to the files written."""
    written: list[Path] = []
    for result in results:
        for item in (result, *result.dot_d_results):
            if item.action in _WRITTEN:
                written.append(item.destination)
    return written


def deploy_defaults(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Write ``defaultconfig.toml`` to each of *targets*.

    A deployed user file is the usual way to change ``word_split`` or
    ``vowel_policy`` for good. lib_layered_config picks the platform paths
    and file modes; on Linux the user layer is
    ``~/.config/portmanteau/config.toml``.

    Returns:
        Files created or overwritten. Empty when every target already
        existed and *force* was False.

    Raises:
        PermissionError: The app and host layers usually need root.
        ValueError: Invalid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        DEFAULT_CONFIG_FILE,
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
    )
    return _written_paths(results)


__all__ = ["deploy_defaults"]
