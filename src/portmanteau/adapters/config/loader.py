"""Read the layered configuration that feeds blend settings and logging.

Contents:
    * :data:`DEFAULT_CONFIG_FILE` - Bundled ``defaultconfig.toml``.
    * :func:`get_config` - Cached layered read, one per profile.
    * :func:`clear_config_cache` - Forget cached reads.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from portmanteau import __init__conf__

#: Lowest configuration layer; also the template copied by ``config-deploy``.
DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Refuse profile names that could escape the configuration directories.

    Raises:
        ValueError: If the name is too long, reserved, or path-like.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge the bundled defaults with every configuration layer found.

    Later layers win: defaults, app, host, user, ``.env``, environment.
    The result is cached per ``(profile, start_dir)``; see
    :func:`clear_config_cache`.

    Args:
        profile: Reads ``profile/<name>/`` variants of each layer.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Example:
        >>> get_config()["portmanteau"]["line_split"]
        '\\n'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Drop cached reads so the next :func:`get_config` hits the files again."""
    _read_layers.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "clear_config_cache",
    "get_config",
    "validate_profile",
]
