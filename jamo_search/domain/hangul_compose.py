from __future__ import annotations

"""Hangul composition and decomposition helpers (domain layer).

It centralises:
- Compatibility jamo ordering constants
- Pure functions for composing and decomposing syllables
- Normalizers that collapse a character to a comparable key (used by the matcher)

Primary API:
- decompose_syllable(c), separate(s), extract_leading(s)
- compose_lvt(lead, vowel, tail), compose_cv(lead, vowel)
- normalize_to_level1(c), normalize_to_level2(c), normalize_medial(c)

None of these raise for text input: characters without a table entry come back unchanged.
"""

from typing import Final

from jamo_search.domain.hangul_unicode import (
    HANGUL_SYLLABLES_START,
    JAMO_LEADING_START,
    JAMO_MEDIAL_START,
    JAMO_TRAILING_START,
    LEADING_INTERVAL,
    MEDIAL_COUNT,
    TRAILING_COUNT,
    is_in_jamo_or_letter_range,
    is_in_syllable_range,
    leading_jamo_to_letter,
    medial_jamo_to_letter,
    syllable_offset,
    trailing_jamo_to_letter,
)


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Syllable arithmetic
# -----------------------------------------------------------------------------

def _leading_jamo(c: str) -> str:
    return chr(syllable_offset(c) // LEADING_INTERVAL + JAMO_LEADING_START)


def _medial_jamo(c: str) -> str:
    return chr(syllable_offset(c) % LEADING_INTERVAL // TRAILING_COUNT + JAMO_MEDIAL_START)


def _trailing_index(c: str) -> int:
    return syllable_offset(c) % LEADING_INTERVAL % TRAILING_COUNT


def decompose_syllable(c: str) -> tuple[str, ...]:
    """Split a precomposed syllable into compatibility letters.

    "가" -> ("ㄱ", "ㅏ"), "닳" -> ("ㄷ", "ㅏ", "ㅀ").
    Anything that is not a syllable comes back as a 1-tuple `(c,)`.
    """
    if not is_in_syllable_range(c):
        return (c,)

    lead = leading_jamo_to_letter(_leading_jamo(c))
    vowel = medial_jamo_to_letter(_medial_jamo(c))

    ti = _trailing_index(c)
    if ti == 0:
        return (lead, vowel)

    # Trailing index 1 is the first trailing jamo (U+11A8)
    tail = trailing_jamo_to_letter(chr(JAMO_TRAILING_START + ti - 1))
    return (lead, vowel, tail)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    li = _CHO_MAP.get(l)
    vi = _JUNG_MAP.get(v)
    ti = _JONG_MAP.get(t)

    if li is None or vi is None or ti is None:
        return ""

    return chr(HANGUL_SYLLABLES_START + (li * MEDIAL_COUNT + vi) * TRAILING_COUNT + ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")


# -----------------------------------------------------------------------------
# String-level helpers
# -----------------------------------------------------------------------------

def separate_char(c: str) -> str:
    """'한' -> "ㅎㅏㄴ". Non-syllables are returned unchanged."""
    return "".join(decompose_syllable(c))


def separate(s: str) -> str:
    """Fully decompose every syllable in `s`.

    >>> separate("한River")
    'ㅎㅏㄴRiver'
    """
    return "".join(separate_char(c) for c in s)


def extract_leading(s: str) -> str:
    """Replace every syllable in `s` with its leading consonant.

    One output character per input character; everything that is not a syllable is kept.

    >>> extract_leading("한글초성")
    'ㅎㄱㅊㅅ'
    >>> extract_leading("Korean초성")
    'Koreanㅊㅅ'
    """
    result: list[str] = []
    for c in s:
        if is_in_syllable_range(c):
            result.append(leading_jamo_to_letter(_leading_jamo(c)))
        else:
            result.append(c)
    return "".join(result)


# -----------------------------------------------------------------------------
# Normalizers
# -----------------------------------------------------------------------------

def normalize_to_level1(c: str) -> str:
    """Collapse to the leading consonant letter: "가, 각, 간, ᄀ, ㄱ" -> "ㄱ"."""
    if is_in_jamo_or_letter_range(c):
        return leading_jamo_to_letter(c)
    if is_in_syllable_range(c):
        return leading_jamo_to_letter(_leading_jamo(c))
    return c


def normalize_to_level2(c: str) -> str:
    """Drop the final consonant of a syllable: "가, 각, 간, 갛" -> "가"."""
    if not is_in_syllable_range(c):
        return c
    return chr(ord(c) - syllable_offset(c) % TRAILING_COUNT)


def normalize_medial(c: str) -> str:
    """Collapse to the vowel letter: "가, 각, 나, ᅡ, ㅏ" -> "ㅏ"."""
    if is_in_syllable_range(c):
        return medial_jamo_to_letter(_medial_jamo(c))
    if is_in_jamo_or_letter_range(c):
        return medial_jamo_to_letter(c)
    return c
