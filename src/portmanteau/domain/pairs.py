"""Turn raw text into the two words handed to the blend engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import BadSplitError, InsufficientWordsError

LINE_SPLIT_ERROR = "Line delimiter can only be a single character"


@dataclass(frozen=True, slots=True)
class WordPair:
    """Two words to blend plus anything that was left over.

    Attributes:
        left: Word supplying the start of the blend.
        right: Word supplying the end of the blend.
        surplus: Extra words that were supplied but ignored.
    """

    left: str
    right: str
    surplus: tuple[str, ...] = ()


def is_whitespace_delimiter(delimiter: str) -> bool:
    """Return True when *delimiter* consists only of whitespace.

    Example:
        >>> is_whitespace_delimiter(" "), is_whitespace_delimiter(",")
        (True, False)
    """
    return not delimiter.strip()


def split_pair(text: str, delimiter: str) -> WordPair:
    """Split *text* into a :class:`WordPair`.

    A whitespace delimiter splits on any run of whitespace; anything else
    splits literally, so empty parts are kept.

    Args:
        text: Line or argument containing both words.
        delimiter: Separator between the words.

    Returns:
        The first two parts, with any remainder as surplus.

    Raises:
        ValueError: If *delimiter* is empty.
        InsufficientWordsError: Whitespace split produced fewer than two words.
        BadSplitError: Literal split produced fewer than two parts.

    Example:
        >>> split_pair("liquid,slinky", ",")
        WordPair(left='liquid', right='slinky', surplus=())
        >>> split_pair("  fluffy   turtle  extra", " ").surplus
        ('extra',)
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    whitespace = is_whitespace_delimiter(delimiter)
    parts = text.split() if whitespace else text.split(delimiter)
    if len(parts) < 2:
        if whitespace:
            raise InsufficientWordsError()
        raise BadSplitError(delimiter)
    return WordPair(left=parts[0], right=parts[1], surplus=tuple(parts[2:]))


def pair_from_arguments(words: Sequence[str], delimiter: str) -> WordPair:
    """Build a :class:`WordPair` from positional command-line arguments.

    With a whitespace delimiter the shell has already split the words, so two
    arguments are expected. Otherwise a single argument holds both words.

    Raises:
        InsufficientWordsError: Too few arguments for the mode.
        BadSplitError: The single argument did not contain the delimiter.

    Example:
        >>> pair_from_arguments(["fluffy", "turtle"], " ")
        WordPair(left='fluffy', right='turtle', surplus=())
        >>> pair_from_arguments(["fluffy+turtle", "more"], "+")
        WordPair(left='fluffy', right='turtle', surplus=('more',))
    """
    if is_whitespace_delimiter(delimiter):
        if len(words) < 2:
            raise InsufficientWordsError(2)
        return WordPair(left=words[0], right=words[1], surplus=tuple(words[2:]))

    if not words:
        raise InsufficientWordsError(1)
    pair = split_pair(words[0], delimiter)
    return WordPair(left=pair.left, right=pair.right, surplus=pair.surplus + tuple(words[1:]))


def split_records(chunks: Iterable[str], separator: str) -> Iterator[str]:
    """Re-split streamed text into records ending at *separator*.

    *chunks* may be cut anywhere, for example the lines of a text stream.
    A separator at the very end does not produce an empty final record, so
    ``"a\\nb\\n"`` and ``"a\\nb"`` both yield two records.

    Raises:
        ValueError: If *separator* is not exactly one character.

    Example:
        >>> list(split_records(["liquid slinky.inno", "vative madlad"], "."))
        ['liquid slinky', 'innovative madlad']
        >>> list(split_records(["fluffy turtle\\n", "\\n"], "\\n"))
        ['fluffy turtle', '']
    """
    if len(separator) != 1:
        raise ValueError(LINE_SPLIT_ERROR)

    pending = ""
    for chunk in chunks:
        pending += chunk
        *records, pending = pending.split(separator)
        yield from records
    if pending:
        yield pending


__all__ = [
    "LINE_SPLIT_ERROR",
    "WordPair",
    "is_whitespace_delimiter",
    "pair_from_arguments",
    "split_pair",
    "split_records",
]
