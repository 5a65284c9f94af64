"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _get_package_dir() -> Path:
    """Locate the package directory from the hatch wheel configuration."""
    pyproject = _load_pyproject()
    tool_table = cast(dict[str, Any], pyproject.get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    packages = cast(list[Any], cast(dict[str, Any], targets_table.get("wheel", {})).get("packages", []))

    for package_entry in packages:
        candidate = PROJECT_ROOT / str(package_entry)
        if candidate.is_dir():
            return candidate
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info outputs the package name and version."""
    from portmanteau import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for portmanteau:" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Static metadata constants are populated."""
    from portmanteau import __init__conf__

    assert __init__conf__.name == "portmanteau"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "portmanteau"
    assert __init__conf__.LAYEREDCONF_SLUG == "portmanteau"


@pytest.mark.os_agnostic
def test_metadata_version_matches_pyproject() -> None:
    """The module version and pyproject version agree."""
    from portmanteau import __init__conf__

    assert _load_pyproject()["project"]["version"] == __init__conf__.version


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The console script is wired to the production entry point."""
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts["portmanteau"] == "portmanteau.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """PEP 561 py.typed marker exists in the package source."""
    py_typed = _get_package_dir() / "py.typed"

    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_default_config_ships_with_the_package() -> None:
    """The bundled defaults live inside the package directory."""
    from portmanteau.adapters.config.loader import DEFAULT_CONFIG_FILE

    assert DEFAULT_CONFIG_FILE.is_file()
    assert _get_package_dir() in DEFAULT_CONFIG_FILE.resolve().parents


@pytest.mark.os_agnostic
def test_default_config_holds_blend_defaults() -> None:
    """The ``[portmanteau]`` defaults match the settings model defaults."""
    from portmanteau.adapters.config.loader import DEFAULT_CONFIG_FILE
    from portmanteau.adapters.config.settings import BlendSettings, load_blend_settings_from_dict

    defaults = cast(dict[str, Any], rtoml.load(DEFAULT_CONFIG_FILE))

    assert load_blend_settings_from_dict(defaults["portmanteau"]) == BlendSettings()
