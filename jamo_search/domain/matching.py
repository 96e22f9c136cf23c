from __future__ import annotations

"""Jamo-aware matching (domain layer).

A keyword character matches more loosely the less of a syllable it spells out:

  - Level1 keyword (ㄱ, ㄴ, ...)   matches any syllable with that leading consonant
  - Level2 keyword (가, 나, ...)   matches that syllable with or without a final consonant
  - anything else (각, "A", "1") matches only itself

For example "ㄷㅎㅁㄱ" finds "동해물과" in "동해물과 백두산이", and "마르고 다도로"
matches all of "마르고 닳도록".

Every entry point takes the comparison as a capability: either a strategy object
implementing `StringSpecialComparator`, or a plain callable. `find_index()` is the
only search loop; strategies differ only in the character comparator they hand it.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Final, Optional, Protocol, Union, runtime_checkable

from jamo_search.domain.enums import JamoLevel
from jamo_search.domain.hangul_compose import (
    normalize_medial,
    normalize_to_level1,
    normalize_to_level2,
)
from jamo_search.domain.hangul_unicode import decomposition_level

logger = logging.getLogger(__name__)


CharComparator = Callable[[str, str], bool]
IndexOfFinder = Callable[[str, str], int]
StringMatcher = Callable[[str, str], Optional[str]]

NOT_FOUND: Final[int] = -1


@runtime_checkable
class StringSpecialComparator(Protocol):
    """A complete matching strategy."""

    def matches(self, s: str, keyword: str) -> Optional[str]: ...

    def index_of(self, s: str, keyword: str) -> int: ...

    def equals(self, c: str, keyword: str) -> bool: ...


# -----------------------------------------------------------------------------
# Character comparators
# -----------------------------------------------------------------------------

def jamo_char_equals(c: str, keyword: str) -> bool:
    """Default comparator: the keyword's level decides how much of `c` must agree."""
    level = decomposition_level(keyword)
    if level == JamoLevel.LEVEL1:
        return normalize_to_level1(c) == normalize_to_level1(keyword)
    if level == JamoLevel.LEVEL2:
        return normalize_to_level2(c) == keyword
    return c == keyword


def chosung_char_equals(c: str, keyword: str) -> bool:
    """Compare leading consonants only: '국' matches '가' and 'ㄱ'."""
    return normalize_to_level1(c) == normalize_to_level1(keyword)


def joongsung_char_equals(c: str, keyword: str) -> bool:
    """Compare vowels only: '국' matches '수' and 'ㅜ'."""
    return normalize_medial(c) == normalize_medial(keyword)


exact_char_equals: CharComparator = operator.eq


# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------

def find_index(s: str, keyword: str, char_equals: CharComparator) -> int:
    """Position of the first occurrence of `keyword` in `s`, or -1.

    Brute force, left to right: look for a position whose character matches the first
    keyword character, then check the rest of the keyword pairwise.
    """
    if len(keyword) > len(s):
        return NOT_FOUND
    if not keyword:
        return 0

    first = keyword[0]
    rest = len(keyword) - 1
    last_start = len(s) - len(keyword)

    i = 0
    while i <= last_start:
        # looking for the first matching char...
        while i <= last_start and not char_equals(s[i], first):
            i += 1
        if i > last_start:
            break

        # ...then the rest of the keyword
        k = 1
        while k <= rest and char_equals(s[i + k], keyword[k]):
            k += 1
        if k > rest:
            return i
        i += 1

    return NOT_FOUND


@dataclass(frozen=True)
class CharComparatorStrategy:
    """`StringSpecialComparator` built from a single character comparator."""

    name: str
    char_equals: CharComparator

    def index_of(self, s: str, keyword: str) -> int:
        return find_index(s, keyword, self.char_equals)

    def matches(self, s: str, keyword: str) -> Optional[str]:
        i = self.index_of(s, keyword)
        if i == NOT_FOUND:
            return None
        return s[i:i + len(keyword)]

    def equals(self, c: str, keyword: str) -> bool:
        return self.char_equals(c, keyword)


class PredefinedComparators:
    """Ready-made strategies. `DEFAULT` is the jamo matcher."""

    JAMO: Final[CharComparatorStrategy] = CharComparatorStrategy("jamo", jamo_char_equals)
    CHOSUNG_ONLY: Final[CharComparatorStrategy] = CharComparatorStrategy("chosung", chosung_char_equals)
    JOONGSUNG_ONLY: Final[CharComparatorStrategy] = CharComparatorStrategy("joongsung", joongsung_char_equals)
    EXACT: Final[CharComparatorStrategy] = CharComparatorStrategy("exact", exact_char_equals)
    DEFAULT: Final[CharComparatorStrategy] = JAMO

    @classmethod
    def all(cls) -> tuple[CharComparatorStrategy, ...]:
        return (cls.JAMO, cls.CHOSUNG_ONLY, cls.JOONGSUNG_ONLY, cls.EXACT)


def comparator_names() -> list[str]:
    return [strategy.name for strategy in PredefinedComparators.all()]


def comparator_by_name(name: str) -> CharComparatorStrategy:
    """Look up a predefined strategy by its name ("jamo", "chosung", ...).

    Raises:
        ValueError: if no strategy has that name.
    """
    key = (name or "").strip().lower()
    for strategy in PredefinedComparators.all():
        if strategy.name == key:
            return strategy
    logger.debug("Unknown comparator name %r; known: %s", name, comparator_names())
    raise ValueError("Unknown comparator: %r (expected one of %s)" % (name, ", ".join(comparator_names())))


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

Finder = Union[StringSpecialComparator, IndexOfFinder]
Matcher = Union[StringSpecialComparator, StringMatcher]
Comparator = Union[StringSpecialComparator, CharComparator]


def _as_finder(finder: Finder) -> IndexOfFinder:
    if isinstance(finder, StringSpecialComparator):
        return finder.index_of
    return finder


def index_of(s: str, keyword: str, finder: Finder = PredefinedComparators.DEFAULT) -> int:
    """Like `str.find()`, but jamo-aware by default.

    >>> index_of("한글초성", "ㅊㅅ")
    2
    """
    return _as_finder(finder)(s, keyword)


def contains(s: str, keyword: str, finder: Finder = PredefinedComparators.DEFAULT) -> bool:
    return _as_finder(finder)(s, keyword) != NOT_FOUND


def equals(s: str, keyword: str, finder: Finder = PredefinedComparators.DEFAULT) -> bool:
    """Whole-string match: same length and the keyword matches at position 0.

    >>> equals("한글초성", "하글ㅊㅅ")
    True
    >>> equals("한글초성", "ㅊㅅ")
    False
    """
    return len(s) == len(keyword) and _as_finder(finder)(s, keyword) == 0


def matches(s: str, keyword: str, matcher: Matcher = PredefinedComparators.DEFAULT) -> Optional[str]:
    """Return the slice of `s` the keyword matched (original text), or None.

    >>> matches("한글초성", "초서")
    '초성'
    """
    if isinstance(matcher, StringSpecialComparator):
        return matcher.matches(s, keyword)
    return matcher(s, keyword)


def char_equals(c: str, keyword: str, comparator: Comparator = PredefinedComparators.DEFAULT) -> bool:
    """Single-character match: char_equals('한', 'ㅎ') and char_equals('한', '하') are True."""
    if isinstance(comparator, StringSpecialComparator):
        return comparator.equals(c, keyword)
    return comparator(c, keyword)
