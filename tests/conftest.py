"""Shared pytest fixtures for engine, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from portmanteau.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for blends and ``result.stderr`` for diagnostics;
    they are captured separately.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from portmanteau.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory (no filesystem, no logging runtime)."""
    from portmanteau.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear cached configuration reads before the test.

    Only clears before, since a test may monkeypatch the loader away.
    """
    from portmanteau.adapters.config.loader import clear_config_cache as clear

    clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without filesystem I/O.

    Example:
        def test_word_split(config_factory) -> None:
            config = config_factory({"portmanteau": {"word_split": ","}})
            assert config["portmanteau"]["word_split"] == ","
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory building production services around a fixed Config.

    Only the I/O boundary (``load_config``) is replaced; settings parsing,
    logging and display stay real.

    Example:
        def test_blend(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"portmanteau": {"word_split": ","}}))
            result = cli_runner.invoke(cli, ["blend", "liquid,slinky"], obj=factory)
            assert result.stdout == "liquinky\\n"
    """
    from portmanteau.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fixed_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), load_config=_fixed_config)
        return lambda: services

    return _inject


@pytest.fixture
def blend_cli(
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[..., Callable[[], AppServices]]:
    """Return a services factory whose ``[portmanteau]`` section is *settings*.

    Example:
        def test_relaxed(cli_runner, blend_cli) -> None:
            factory = blend_cli(vowel_policy="relaxed")
    """

    def _build(**settings: Any) -> Callable[[], AppServices]:
        return inject_config(config_factory({"portmanteau": settings}))

    return _build


@pytest.fixture
def inject_deploy_defaults(
    clear_config_cache: None,
) -> Callable[[Callable[..., Any]], Callable[[], AppServices]]:
    """Return a factory that swaps in a custom ``deploy_defaults``."""
    from portmanteau.composition import build_production

    def _inject(deploy: Callable[..., Any]) -> Callable[[], AppServices]:
        services = replace(build_production(), deploy_defaults=deploy)
        return lambda: services

    return _inject
