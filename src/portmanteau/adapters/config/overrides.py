"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` ends the dotted path; the first dot of the path ends the
    section name.

    Raises:
        ValueError: Missing ``=``, missing dot, or an empty path component.

    Examples:
        >>> override = parse_override("portmanteau.vowel_policy=relaxed")
        >>> override.section, override.key_path, override.value
        ('portmanteau', ('vowel_policy',), 'relaxed')

        >>> parse_override("portmanteau.word_split=a=b").value
        'a=b'
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret *raw* as JSON, keeping the plain string when that fails.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value("strict")
        'strict'
        >>> coerce_value('","')
        ','
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert *override* into the nested dict passed to ``Config.with_overrides``.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into *config*.

    Returns:
        A new Config, or *config* itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Example:
        >>> cfg = Config({"portmanteau": {"word_split": " "}}, {})
        >>> apply_overrides(cfg, ("portmanteau.word_split=,",))["portmanteau"]["word_split"]
        ','
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
