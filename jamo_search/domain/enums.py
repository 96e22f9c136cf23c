from __future__ import annotations

from enum import Enum, IntEnum


class JamoLevel(IntEnum):
    """How much of a syllable a single character specifies."""
    NONE = 0
    LEVEL1 = 1  # leading consonant only (ㄱ, ㄴ, ㄲ, ...)
    LEVEL2 = 2  # leading consonant + vowel (가, 나, 휘, ...)
    LEVEL3 = 3  # leading consonant + vowel + final (각, 닳, ...)


class JosaType(Enum):
    """Particle pairs chosen by whether a word ends in a batchim."""
    EN = "en"    # 은/는
    YG = "yg"    # 이/가
    ER = "er"    # 을/를
    WG = "wg"    # 과/와
    YDD = "ydd"  # 이다/다
    ERR = "err"  # 으로/로
