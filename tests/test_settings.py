"""Blend settings stories: model validation and the ``[portmanteau]`` loader."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from portmanteau.adapters.config.settings import (
    SETTINGS_SECTION,
    BlendSettings,
    load_blend_settings,
    load_blend_settings_from_dict,
)
from portmanteau.domain.enums import VowelPolicy
from portmanteau.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_blend_settings_defaults() -> None:
    """Defaults match the bundled defaultconfig.toml values."""
    settings = BlendSettings()

    assert settings.word_split == " "
    assert settings.line_split == "\n"
    assert settings.vowel_policy is VowelPolicy.STRICT


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["relaxed", "RELAXED", "  Relaxed "])
def test_blend_settings_policy_is_case_insensitive(raw: str) -> None:
    """Policy names are normalised before validation."""
    assert BlendSettings(vowel_policy=raw).vowel_policy is VowelPolicy.RELAXED  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_blend_settings_rejects_unknown_policy() -> None:
    """Unknown policy names fail validation."""
    with pytest.raises(ValidationError):
        BlendSettings(vowel_policy="loose")  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_blend_settings_rejects_empty_word_split() -> None:
    """An empty delimiter cannot separate two words."""
    with pytest.raises(ValidationError, match="word_split must not be empty"):
        BlendSettings(word_split="")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("line_split", ["", "ab", ",\n"])
def test_blend_settings_require_single_character_line_split(line_split: str) -> None:
    """Stdin records end at exactly one character."""
    with pytest.raises(ValidationError, match="Line delimiter can only be a single character"):
        BlendSettings(line_split=line_split)


@pytest.mark.os_agnostic
def test_blend_settings_are_frozen() -> None:
    """Settings cannot be mutated after validation."""
    settings = BlendSettings()

    with pytest.raises(ValidationError):
        settings.word_split = ","  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_blend_settings_model_copy_applies_cli_overrides() -> None:
    """model_copy(update=...) yields a new settings object with overrides."""
    base = BlendSettings(word_split=",")

    updated = base.model_copy(update={"vowel_policy": VowelPolicy.RELAXED})

    assert updated.word_split == ","
    assert updated.vowel_policy is VowelPolicy.RELAXED
    assert base.vowel_policy is VowelPolicy.STRICT


@pytest.mark.os_agnostic
def test_load_from_dict_wraps_validation_errors() -> None:
    """Invalid values surface as ConfigurationError naming the section."""
    with pytest.raises(ConfigurationError, match=r"Invalid \[portmanteau\] configuration"):
        load_blend_settings_from_dict({"vowel_policy": "sometimes"})


@pytest.mark.os_agnostic
def test_load_from_config_reads_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Values from the ``[portmanteau]`` section are used."""
    config = config_factory({SETTINGS_SECTION: {"word_split": "+", "vowel_policy": "relaxed"}})

    settings = load_blend_settings(config)

    assert settings == BlendSettings(word_split="+", vowel_policy=VowelPolicy.RELAXED)


@pytest.mark.os_agnostic
def test_load_from_config_without_section_uses_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A missing section falls back to model defaults."""
    assert load_blend_settings(config_factory({"other": {"key": 1}})) == BlendSettings()


@pytest.mark.os_agnostic
def test_load_from_config_rejects_non_table_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A scalar where a table is expected is a configuration error."""
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_blend_settings(config_factory({SETTINGS_SECTION: "oops"}))


@pytest.mark.os_agnostic
def test_load_from_config_rejects_empty_delimiter(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """An empty word_split in config is a configuration error."""
    with pytest.raises(ConfigurationError):
        load_blend_settings(config_factory({SETTINGS_SECTION: {"word_split": ""}}))
