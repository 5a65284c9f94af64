"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.blending` - The blend engine (validation, matchers, post-filter)
    * :mod:`.pairs` - Splitting raw input into word pairs
    * :mod:`.enums` - Domain enumerations (VowelPolicy, RejectionReason, ...)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .blending import MIN_WORD_SIZE, VOWELS, blend, diagnose, validate
from .enums import DeployTarget, OutputFormat, RejectionReason, VowelPolicy
from .errors import (
    BadSplitError,
    ConfigurationError,
    InsufficientWordsError,
    NoPortmanteauError,
    WordPairError,
)
from .pairs import LINE_SPLIT_ERROR, WordPair, pair_from_arguments, split_pair, split_records

__all__ = [
    # Blending
    "MIN_WORD_SIZE",
    "VOWELS",
    "blend",
    "diagnose",
    "validate",
    # Word pairs
    "LINE_SPLIT_ERROR",
    "WordPair",
    "pair_from_arguments",
    "split_pair",
    "split_records",
    # Enums
    "DeployTarget",
    "OutputFormat",
    "RejectionReason",
    "VowelPolicy",
    # Errors
    "BadSplitError",
    "ConfigurationError",
    "InsufficientWordsError",
    "NoPortmanteauError",
    "WordPairError",
]
