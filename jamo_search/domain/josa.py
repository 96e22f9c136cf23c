from __future__ import annotations

"""Josa (particle) selection.

Korean particles come in pairs whose form depends on whether the preceding word
ends in a final consonant: 책 + 은, 사과 + 는.
"""

from pathlib import Path

from jamo_search.domain.enums import JosaType
from jamo_search.domain.hangul_compose import decompose_syllable
from jamo_search.domain.hangul_unicode import is_in_syllable_range, is_level3_char
from jamo_search.domain.josa_data import get_josa_pair


def append_josa(s: str, after_jongsung: str, after_non_jongsung: str) -> str:
    """Append the particle form that fits the last syllable of `s`.

    Words that do not end in a Hangul syllable (digits, Latin text) are returned unchanged.

    >>> append_josa("책", "은", "는")
    '책은'
    >>> append_josa("사과", "은", "는")
    '사과는'
    """
    if not s.strip():
        return s

    last = s[-1]
    if is_in_syllable_range(last):
        return s + (after_jongsung if is_level3_char(last) else after_non_jongsung)

    # TODO: pick particles after Arabic numerals by reading the number aloud (1 -> 일, 2 -> 이)
    return s


def _ends_with_rieul(s: str) -> bool:
    parts = decompose_syllable(s[-1]) if s else ()
    return len(parts) == 3 and parts[2] == "ㄹ"


def append_josa_type(s: str, josa_type: JosaType, path: Path | None = None) -> str:
    """Append a predefined particle pair: append_josa_type("책", JosaType.EN) == "책은"."""
    after_jongsung, after_non_jongsung = get_josa_pair(josa_type, path)

    # (으)로 takes the vowel form after ㄹ: 서울로, not 서울으로
    if josa_type is JosaType.ERR and _ends_with_rieul(s):
        return s + after_non_jongsung

    return append_josa(s, after_jongsung, after_non_jongsung)
