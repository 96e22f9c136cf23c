from __future__ import annotations

"""Hangul Unicode classification helpers.

This module is *domain* logic (no I/O).

It provides:
  - The Unicode ranges for syllables, conjoining jamo and compatibility jamo ("letters")
  - The fixed letter <-> conjoining-jamo mapping tables
  - Level predicates used by the matcher (`decomposition_level()` and friends)

Notes:
  - The tables are read-only views; they are built once at import time.
  - Every table accessor falls back to the input character when there is no entry.
"""

from types import MappingProxyType
from typing import Final, Mapping

from jamo_search.domain.enums import JamoLevel


# Unicode ranges (inclusive)
HANGUL_SYLLABLES_START: Final[int] = 0xAC00  # '가'
HANGUL_SYLLABLES_END: Final[int] = 0xD7A3  # '힣'
HANGUL_JAMO_START: Final[int] = 0x1100
HANGUL_JAMO_END: Final[int] = 0x11FF
HANGUL_LETTER_START: Final[int] = 0x3130
HANGUL_LETTER_END: Final[int] = 0x318F

# Sub-block starts inside the conjoining jamo block
JAMO_LEADING_START: Final[int] = 0x1100
JAMO_LEADING_END: Final[int] = 0x1112
JAMO_MEDIAL_START: Final[int] = 0x1161
JAMO_TRAILING_START: Final[int] = 0x11A8

# Syllable arithmetic: 19 leads x 21 vowels x 28 finals (index 0 = no final)
MEDIAL_COUNT: Final[int] = 21
TRAILING_COUNT: Final[int] = 28
LEADING_INTERVAL: Final[int] = MEDIAL_COUNT * TRAILING_COUNT  # 588


# -----------------------------------------------------------------------------
# (Jamo) <-> (Compatibility jamo) tables
# -----------------------------------------------------------------------------

_LEADING_JAMO_TO_LETTER: Final[dict[str, str]] = {
    "\u1100": "\u3131",  # ㄱ
    "\u1101": "\u3132",  # ㄲ
    "\u1102": "\u3134",  # ㄴ
    "\u1103": "\u3137",  # ㄷ
    "\u1104": "\u3138",  # ㄸ
    "\u1105": "\u3139",  # ㄹ
    "\u1106": "\u3141",  # ㅁ
    "\u1107": "\u3142",  # ㅂ
    "\u1108": "\u3143",  # ㅃ
    "\u1109": "\u3145",  # ㅅ
    "\u110A": "\u3146",  # ㅆ
    "\u110B": "\u3147",  # ㅇ
    "\u110C": "\u3148",  # ㅈ
    "\u110D": "\u3149",  # ㅉ
    "\u110E": "\u314A",  # ㅊ
    "\u110F": "\u314B",  # ㅋ
    "\u1110": "\u314C",  # ㅌ
    "\u1111": "\u314D",  # ㅍ
    "\u1112": "\u314E",  # ㅎ
}

_MEDIAL_JAMO_TO_LETTER: Final[dict[str, str]] = {
    "\u1161": "\u314F",  # ㅏ
    "\u1162": "\u3150",  # ㅐ
    "\u1163": "\u3151",  # ㅑ
    "\u1164": "\u3152",  # ㅒ
    "\u1165": "\u3153",  # ㅓ
    "\u1166": "\u3154",  # ㅔ
    "\u1167": "\u3155",  # ㅕ
    "\u1168": "\u3156",  # ㅖ
    "\u1169": "\u3157",  # ㅗ
    "\u116A": "\u3158",  # ㅘ
    "\u116B": "\u3159",  # ㅙ
    "\u116C": "\u315A",  # ㅚ
    "\u116D": "\u315B",  # ㅛ
    "\u116E": "\u315C",  # ㅜ
    "\u116F": "\u315D",  # ㅝ
    "\u1170": "\u315E",  # ㅞ
    "\u1171": "\u315F",  # ㅟ
    "\u1172": "\u3160",  # ㅠ
    "\u1173": "\u3161",  # ㅡ
    "\u1174": "\u3162",  # ㅢ
    "\u1175": "\u3163",  # ㅣ
}

_TRAILING_JAMO_TO_LETTER: Final[dict[str, str]] = {
    "\u11A8": "\u3131",  # ㄱ
    "\u11A9": "\u3132",  # ㄲ
    "\u11AA": "\u3133",  # ㄳ
    "\u11AB": "\u3134",  # ㄴ
    "\u11AC": "\u3135",  # ㄵ
    "\u11AD": "\u3136",  # ㄶ
    "\u11AE": "\u3137",  # ㄷ
    "\u11AF": "\u3139",  # ㄹ
    "\u11B0": "\u313A",  # ㄺ
    "\u11B1": "\u313B",  # ㄻ
    "\u11B2": "\u313C",  # ㄼ
    "\u11B3": "\u313D",  # ㄽ
    "\u11B4": "\u313E",  # ㄾ
    "\u11B5": "\u313F",  # ㄿ
    "\u11B6": "\u3140",  # ㅀ
    "\u11B7": "\u3141",  # ㅁ
    "\u11B8": "\u3142",  # ㅂ
    "\u11B9": "\u3144",  # ㅄ
    "\u11BA": "\u3145",  # ㅅ
    "\u11BB": "\u3146",  # ㅆ
    "\u11BC": "\u3147",  # ㅇ
    "\u11BD": "\u3148",  # ㅈ
    "\u11BE": "\u314A",  # ㅊ
    "\u11BF": "\u314B",  # ㅋ
    "\u11C0": "\u314C",  # ㅌ
    "\u11C1": "\u314D",  # ㅍ
    "\u11C2": "\u314E",  # ㅎ
}

# Public read-only views
LEADING_JAMO_TO_LETTER: Final[Mapping[str, str]] = MappingProxyType(_LEADING_JAMO_TO_LETTER)
LETTER_TO_LEADING_JAMO: Final[Mapping[str, str]] = MappingProxyType(
    {letter: jamo for jamo, letter in _LEADING_JAMO_TO_LETTER.items()}
)
MEDIAL_JAMO_TO_LETTER: Final[Mapping[str, str]] = MappingProxyType(_MEDIAL_JAMO_TO_LETTER)
TRAILING_JAMO_TO_LETTER: Final[Mapping[str, str]] = MappingProxyType(_TRAILING_JAMO_TO_LETTER)


def letter_to_leading_jamo(c: str) -> str:
    """ㄱ (U+3131) -> ᄀ (U+1100). Anything else is returned unchanged."""
    return LETTER_TO_LEADING_JAMO.get(c, c)


def leading_jamo_to_letter(c: str) -> str:
    return LEADING_JAMO_TO_LETTER.get(c, c)


def medial_jamo_to_letter(c: str) -> str:
    """ᅡ (U+1161) -> ㅏ (U+314F). Anything else is returned unchanged."""
    return MEDIAL_JAMO_TO_LETTER.get(c, c)


def trailing_jamo_to_letter(c: str) -> str:
    return TRAILING_JAMO_TO_LETTER.get(c, c)


# -----------------------------------------------------------------------------
# Range predicates
# -----------------------------------------------------------------------------

def _in_range(start: int, c: str, end: int) -> bool:
    return len(c) == 1 and start <= ord(c) <= end


def is_in_syllable_range(c: str) -> bool:
    return _in_range(HANGUL_SYLLABLES_START, c, HANGUL_SYLLABLES_END)


def is_in_jamo_or_letter_range(c: str) -> bool:
    """True for conjoining jamo (U+1100..U+11FF) and compatibility letters (U+3130..U+318F)."""
    return _in_range(HANGUL_JAMO_START, c, HANGUL_JAMO_END) or _in_range(
        HANGUL_LETTER_START, c, HANGUL_LETTER_END
    )


def syllable_offset(c: str) -> int:
    """Offset of a precomposed syllable from '가'. Only meaningful inside the syllable range."""
    return ord(c) - HANGUL_SYLLABLES_START


# -----------------------------------------------------------------------------
# Level predicates
#   Level1 : a bare leading consonant (ㄱ, ㄴ, ㄲ, ...); finals-only letters like ㄳ/ㅀ are not
#   Level2 : leading consonant + vowel (가, 나, 휘, ...)
#   Level3 : leading consonant + vowel + final
# -----------------------------------------------------------------------------

def is_level1_char(c: str) -> bool:
    if not is_in_jamo_or_letter_range(c):
        return False
    return _in_range(JAMO_LEADING_START, letter_to_leading_jamo(c), JAMO_LEADING_END)


def is_level2_char(c: str) -> bool:
    return is_in_syllable_range(c) and syllable_offset(c) % TRAILING_COUNT == 0


def is_level3_char(c: str) -> bool:
    """A syllable with a final consonant (batchim)."""
    return is_in_syllable_range(c) and syllable_offset(c) % TRAILING_COUNT != 0


def decomposition_level(c: str) -> JamoLevel:
    if is_level1_char(c):
        return JamoLevel.LEVEL1
    if is_level2_char(c):
        return JamoLevel.LEVEL2
    if is_level3_char(c):
        return JamoLevel.LEVEL3
    return JamoLevel.NONE
