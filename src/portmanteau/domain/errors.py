"""Domain-specific exceptions for typed error handling at boundaries.

The blend engine itself never raises; these types describe problems in the
input around it (how words are supplied) and in configuration.
"""

from __future__ import annotations


class WordPairError(ValueError):
    """Input could not be turned into two words to blend.

    Base class for malformed invocations. CLI boundaries map it to a usage
    error exit code.
    """


class InsufficientWordsError(WordPairError):
    """Fewer words were supplied than the input mode requires.

    Args:
        expected: Number of arguments the mode expects, or None when the
            count is not meaningful (for example a line read from stdin).

    Example:
        >>> str(InsufficientWordsError(2))
        'Insufficient arguments provided, expected 2'
        >>> str(InsufficientWordsError())
        "Couldn't find two words to combine"
    """

    def __init__(self, expected: int | None = None) -> None:
        self.expected = expected
        if expected is None:
            super().__init__("Couldn't find two words to combine")
        else:
            super().__init__(f"Insufficient arguments provided, expected {expected}")


class BadSplitError(WordPairError):
    """Splitting on the configured delimiter yielded fewer than two parts.

    Example:
        >>> str(BadSplitError(","))
        'Split "," failed to produce at least two parts'
    """

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter
        super().__init__(f'Split "{delimiter}" failed to produce at least two parts')


class NoPortmanteauError(Exception):
    """Two valid-looking words did not blend.

    Example:
        >>> str(NoPortmanteauError("tiny", "word"))
        '"tiny" and "word" did not produce a portmanteau'
    """

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f'"{left}" and "{right}" did not produce a portmanteau')


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Example:
        >>> str(ConfigurationError("word_split must not be empty"))
        'word_split must not be empty'
    """


__all__ = [
    "BadSplitError",
    "ConfigurationError",
    "InsufficientWordsError",
    "NoPortmanteauError",
    "WordPairError",
]
