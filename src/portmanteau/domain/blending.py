"""Blend engine: splice two words into a portmanteau.

The engine is a chain of matchers tried from most to least selective. Each
matcher yields at most one candidate; the first candidate found is checked
against both inputs and discarded when it adds nothing new.

Contents:
    * :func:`blend` - Entry point returning the portmanteau or ``None``.
    * :func:`diagnose` - Explain why :func:`blend` produced nothing.
    * :func:`match_by_trigram` - Join on a shared three-letter run.
    * :func:`match_by_common_vowel` - Join on a vowel present in both words.
    * :func:`match_by_any_vowel` - Join on the outermost vowels of each word.

All functions are pure. Nothing here logs, raises for bad input, or keeps state
between calls, so any of them may be called from any thread.
"""

from __future__ import annotations

from typing import Final

from .enums import RejectionReason, VowelPolicy

MIN_WORD_SIZE: Final[int] = 5
VOWEL_SEARCH_MARGIN: Final[int] = 1
#: Priority order for the common-vowel search.
VOWELS: Final[tuple[str, ...]] = ("a", "e", "i", "o", "u")

_LOWERCASE_ASCII: Final[frozenset[str]] = frozenset("abcdefghijklmnopqrstuvwxyz")


def validate(word: str) -> bool:
    """Return True when *word* is long enough and purely lowercase ASCII.

    Example:
        >>> validate("hello")
        True
        >>> validate("Hello"), validate("smol"), validate("accénts")
        (False, False, False)
    """
    return len(word) >= MIN_WORD_SIZE and all(char in _LOWERCASE_ASCII for char in word)


def has_vowel(word: str) -> bool:
    """Return True when *word* contains at least one of ``a e i o u``.

    Example:
        >>> has_vowel("howdy"), has_vowel("rhythm")
        (True, False)
    """
    return any(vowel in word for vowel in VOWELS)


def trigrams_of(word: str) -> list[str]:
    """Return every three-letter run of *word* ordered by start index.

    Example:
        >>> trigrams_of("abcde")
        ['abc', 'bcd', 'cde']
        >>> trigrams_of("ab")
        []
    """
    return [word[start : start + 3] for start in range(len(word) - 2)]


def match_by_trigram(left: str, right: str) -> str | None:
    """Join the words where they share a three-letter run.

    The first trigram of *left* and the last two trigrams of *right* never
    take part, so both words always contribute at least one letter of their
    own. Trigrams of *left* are visited from the end backwards and, for each,
    trigrams of *right* from the start forwards; the first identical pair wins.
    The result keeps *left* up to the shared run and *right* from it onwards.

    Args:
        left: Validated word supplying the prefix.
        right: Validated word supplying the suffix.

    Returns:
        The spliced candidate, or None when no trigram is shared.

    Example:
        >>> match_by_trigram("chrome", "promise")
        'chromise'
        >>> match_by_trigram("fluffy", "turtle") is None
        True
    """
    left_trigrams = trigrams_of(left)
    right_trigrams = trigrams_of(right)[:-2]

    for left_start in range(len(left_trigrams) - 1, 0, -1):
        trigram = left_trigrams[left_start]
        for right_start, candidate in enumerate(right_trigrams):
            if candidate == trigram:
                return left[:left_start] + right[right_start:]
    return None


def _vowel_positions(left: str, right: str, vowel: str) -> tuple[int | None, int | None]:
    """Locate *vowel* in the split windows of both words.

    The last letter of *left* and the first letter of *right* are outside the
    windows. Missing positions are reported as None.
    """
    left_index = left.rfind(vowel, 0, len(left) - VOWEL_SEARCH_MARGIN)
    right_index = right.find(vowel, VOWEL_SEARCH_MARGIN)
    return (
        left_index if left_index >= 0 else None,
        right_index if right_index >= 0 else None,
    )


def match_by_common_vowel(left: str, right: str, policy: VowelPolicy = VowelPolicy.STRICT) -> str | None:
    """Join the words on a vowel found in both.

    Vowels are tried in :data:`VOWELS` order. For each, the rightmost
    occurrence in *left* (ignoring its last letter) and the leftmost in
    *right* (ignoring its first letter) are located; the first vowel found on
    both sides decides the split.

    Under :attr:`VowelPolicy.RELAXED` the scan also remembers the latest
    left position and earliest right position of any vowel. When no single
    vowel appears on both sides these are combined instead of giving up.

    Args:
        left: Validated word supplying the prefix.
        right: Validated word supplying the suffix.
        policy: Whether differing vowels may be paired.

    Returns:
        The spliced candidate, or None when no split point qualifies.

    Example:
        >>> match_by_common_vowel("liquid", "slinky")
        'liquinky'
        >>> match_by_common_vowel("squirrel", "acorn") is None
        True
        >>> match_by_common_vowel("squirrel", "acorn", VowelPolicy.RELAXED)
        'squirrorn'
    """
    left_seen: list[int] = []
    right_seen: list[int] = []
    for vowel in VOWELS:
        left_index, right_index = _vowel_positions(left, right, vowel)
        if left_index is not None and right_index is not None:
            return left[:left_index] + right[right_index:]
        if left_index is not None:
            left_seen.append(left_index)
        if right_index is not None:
            right_seen.append(right_index)

    if policy is VowelPolicy.RELAXED and left_seen and right_seen:
        return left[: max(left_seen)] + right[min(right_seen) :]
    return None


def match_by_any_vowel(left: str, right: str) -> str | None:
    """Join the last vowel of *left* to the first vowel of *right*.

    No margin applies and the vowels need not match.

    Example:
        >>> match_by_any_vowel("squirrel", "acorn")
        'squirracorn'
        >>> match_by_any_vowel("rhythm", "acorn") is None
        True
    """
    left_end = max(left.rfind(vowel) for vowel in VOWELS)
    right_starts = [index for index in (right.find(vowel) for vowel in VOWELS) if index >= 0]
    if left_end < 0 or not right_starts:
        return None
    return left[:left_end] + right[min(right_starts) :]


def is_degenerate(candidate: str, left: str, right: str) -> bool:
    """Return True when *candidate* is already contained in either input.

    Example:
        >>> is_degenerate("ater", "around", "later")
        True
        >>> is_degenerate("flurtle", "fluffy", "turtle")
        False
    """
    return candidate in left or candidate in right


def _vowel_candidate(left: str, right: str, policy: VowelPolicy) -> str | None:
    if not (has_vowel(left) and has_vowel(right)):
        return None
    return match_by_common_vowel(left, right, policy) or match_by_any_vowel(left, right)


def _candidate(left: str, right: str, policy: VowelPolicy) -> str | None:
    if not (validate(left) and validate(right)):
        return None
    return match_by_trigram(left, right) or _vowel_candidate(left, right, policy)


def blend(left: str, right: str, *, policy: VowelPolicy = VowelPolicy.STRICT) -> str | None:
    r"""Create a portmanteau of *left* and *right* if possible.

    Both words must be at least :data:`MIN_WORD_SIZE` lowercase ASCII letters.
    A shared trigram is always preferred; vowel-based joins are only tried
    when there is none and both words contain a vowel. A result that is a
    substring of either input is rejected.

    Args:
        left: Word supplying the start of the blend.
        right: Word supplying the end of the blend.
        policy: Vowel pairing policy; see :func:`match_by_common_vowel`.

    Returns:
        The portmanteau, or None when the words cannot be blended. Invalid
        input is not an error and also yields None.

    Example:
        >>> blend("fluffy", "turtle")
        'flurtle'
        >>> blend("tiny", "word") is None
        True
        >>> blend("sdfghjk", "qwrdfgvbnm")
        'sdfgvbnm'
    """
    candidate = _candidate(left, right, policy)
    if candidate is None or is_degenerate(candidate, left, right):
        return None
    return candidate


def diagnose(left: str, right: str, *, policy: VowelPolicy = VowelPolicy.STRICT) -> RejectionReason | None:
    """Explain why :func:`blend` yields nothing for these words.

    Returns:
        The first failing check, or None when the words blend.

    Example:
        >>> diagnose("tiny", "words")
        <RejectionReason.INVALID_LEFT: 'invalid-left'>
        >>> diagnose("around", "later")
        <RejectionReason.DEGENERATE: 'degenerate'>
        >>> diagnose("fluffy", "turtle") is None
        True
    """
    if not validate(left):
        return RejectionReason.INVALID_LEFT
    if not validate(right):
        return RejectionReason.INVALID_RIGHT
    candidate = _candidate(left, right, policy)
    if candidate is None:
        return RejectionReason.NO_JOIN_POINT
    if is_degenerate(candidate, left, right):
        return RejectionReason.DEGENERATE
    return None


__all__ = [
    "MIN_WORD_SIZE",
    "VOWELS",
    "VOWEL_SEARCH_MARGIN",
    "blend",
    "diagnose",
    "has_vowel",
    "is_degenerate",
    "match_by_any_vowel",
    "match_by_common_vowel",
    "match_by_trigram",
    "trigrams_of",
    "validate",
]
