"""Blend settings model and loader for the ``[portmanteau]`` config section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from portmanteau.domain.enums import VowelPolicy
from portmanteau.domain.errors import ConfigurationError
from portmanteau.domain.pairs import LINE_SPLIT_ERROR

#: Name of the configuration section read by :func:`load_blend_settings`.
SETTINGS_SECTION = "portmanteau"


class BlendSettings(BaseModel):
    """Validated, immutable blending settings.

    Example:
        >>> settings = BlendSettings(word_split=",", vowel_policy="relaxed")
        >>> settings.word_split, settings.vowel_policy
        (',', <VowelPolicy.RELAXED: 'relaxed'>)
        >>> BlendSettings().word_split, BlendSettings().line_split
        (' ', '\\n')
    """

    model_config = ConfigDict(frozen=True)

    word_split: str = " "
    line_split: str = "\n"
    vowel_policy: VowelPolicy = VowelPolicy.STRICT

    @field_validator("word_split")
    @classmethod
    def _reject_empty_delimiter(cls, v: str) -> str:
        """An empty delimiter cannot separate two words."""
        if v == "":
            raise ValueError("word_split must not be empty")
        return v

    @field_validator("line_split")
    @classmethod
    def _require_single_character(cls, v: str) -> str:
        """Stdin records end at exactly one character."""
        if len(v) != 1:
            raise ValueError(LINE_SPLIT_ERROR)
        return v

    @field_validator("vowel_policy", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        """Accept policy names in any case, as env variables often are."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_blend_settings_from_dict(section: Mapping[str, Any]) -> BlendSettings:
    """Parse a ``[portmanteau]`` mapping into :class:`BlendSettings`.

    Raises:
        ConfigurationError: If a value fails validation.

    Example:
        >>> load_blend_settings_from_dict({"word_split": "+"}).word_split
        '+'
    """
    try:
        return BlendSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{SETTINGS_SECTION}] configuration: {exc}") from exc


def load_blend_settings(config: Config) -> BlendSettings:
    """Read the ``[portmanteau]`` section of *config*.

    Missing sections and keys fall back to the model defaults.

    Raises:
        ConfigurationError: If the section holds invalid values.
    """
    raw: object = config.get(SETTINGS_SECTION, default={})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{SETTINGS_SECTION}] must be a table, got {type(raw).__name__}")
    return load_blend_settings_from_dict(cast("Mapping[str, Any]", raw))


__all__ = [
    "SETTINGS_SECTION",
    "BlendSettings",
    "load_blend_settings",
    "load_blend_settings_from_dict",
]
