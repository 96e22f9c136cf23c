"""Hangul jamo-aware search, comparison and decomposition."""

from jamo_search.domain.enums import JamoLevel, JosaType
from jamo_search.domain.hangul_compose import (
    compose_cv,
    compose_lvt,
    decompose_syllable,
    extract_leading,
    separate,
)
from jamo_search.domain.hangul_unicode import decomposition_level
from jamo_search.domain.josa import append_josa, append_josa_type
from jamo_search.domain.matching import (
    CharComparatorStrategy,
    PredefinedComparators,
    StringSpecialComparator,
    char_equals,
    comparator_by_name,
    contains,
    equals,
    index_of,
    matches,
)

__all__ = [
    "JamoLevel",
    "JosaType",
    "compose_cv",
    "compose_lvt",
    "decompose_syllable",
    "extract_leading",
    "separate",
    "decomposition_level",
    "append_josa",
    "append_josa_type",
    "CharComparatorStrategy",
    "PredefinedComparators",
    "StringSpecialComparator",
    "char_equals",
    "comparator_by_name",
    "contains",
    "equals",
    "index_of",
    "matches",
]
