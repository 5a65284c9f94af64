"""Type-safe domain enums for blending policy, diagnostics, and config handling."""

from __future__ import annotations

from enum import Enum


class VowelPolicy(str, Enum):
    """How the common-vowel matcher treats words that share no vowel.

    Inherits from str so config values and Click choices compare directly.

    Attributes:
        STRICT: Only a vowel present on both sides yields a split point.
        RELAXED: Fall back to pairing the best left and right positions of
            different vowels.

    Example:
        >>> VowelPolicy("relaxed") is VowelPolicy.RELAXED
        True
        >>> VowelPolicy.STRICT == "strict"
        True
    """

    STRICT = "strict"
    RELAXED = "relaxed"


class RejectionReason(str, Enum):
    """Why two words produced no portmanteau.

    Attributes:
        INVALID_LEFT: First word is too short or not lowercase ASCII.
        INVALID_RIGHT: Second word is too short or not lowercase ASCII.
        NO_JOIN_POINT: No shared trigram and at least one word has no vowel.
        DEGENERATE: The only candidate is contained in one of the inputs.
    """

    INVALID_LEFT = "invalid-left"
    INVALID_RIGHT = "invalid-right"
    NO_JOIN_POINT = "no-join-point"
    DEGENERATE = "degenerate"

    @property
    def description(self) -> str:
        """Human-readable explanation for CLI diagnostics.

        Example:
            >>> RejectionReason.DEGENERATE.description
            'the blend would only repeat one of the input words'
        """
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[RejectionReason, str] = {
    RejectionReason.INVALID_LEFT: "the first word needs at least 5 lowercase ASCII letters",
    RejectionReason.INVALID_RIGHT: "the second word needs at least 5 lowercase ASCII letters",
    RejectionReason.NO_JOIN_POINT: "the words share no trigram and one of them has no vowel",
    RejectionReason.DEGENERATE: "the blend would only repeat one of the input words",
}


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "OutputFormat",
    "RejectionReason",
    "VowelPolicy",
]
