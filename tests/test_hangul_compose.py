import pytest

from jamo_search.domain.hangul_compose import (
    compose_cv,
    compose_lvt,
    decompose_syllable,
    extract_leading,
    normalize_medial,
    normalize_to_level1,
    normalize_to_level2,
    separate,
    separate_char,
)


def test_compose_cv_basic():
    assert compose_cv("ㄱ", "ㅏ") == "가"
    assert compose_cv("ㄴ", "ㅣ") == "니"


def test_compose_cv_invalid():
    assert compose_cv("", "ㅏ") == ""
    assert compose_cv("ㄱ", "") == ""
    assert compose_cv("ㅏ", "ㄱ") == ""


def test_compose_lvt_with_final():
    assert compose_lvt("ㄷ", "ㅏ", "ㅀ") == "닳"
    assert compose_lvt("ㅎ", "ㅣ", "ㅎ") == "힣"
    assert compose_lvt("ㄱ", "ㅏ", "ㄸ") == ""  # ㄸ is never a final


def test_decompose_syllable_levels():
    assert decompose_syllable("가") == ("ㄱ", "ㅏ")
    assert decompose_syllable("닳") == ("ㄷ", "ㅏ", "ㅀ")
    assert decompose_syllable("A") == ("A",)
    assert decompose_syllable("ㄱ") == ("ㄱ",)


@pytest.mark.parametrize("syllable,tail", [("밭", "ㅌ"), ("앞", "ㅍ"), ("좋", "ㅎ"), ("닭", "ㄺ"), ("값", "ㅄ")])
def test_last_trailing_consonants_map_to_letters(syllable, tail):
    assert decompose_syllable(syllable)[-1] == tail


def test_decompose_compose_round_trip_for_every_syllable():
    for cp in range(0xAC00, 0xD7A4):
        c = chr(cp)
        assert compose_lvt(*decompose_syllable(c)) == c, "round trip failed for U+%04X" % cp


def test_last_syllables_of_the_block_decompose():
    # U+D7A0..U+D7A3 sit past the end some implementations use
    assert separate("힠힡힢힣") == "ㅎㅣㅋㅎㅣㅌㅎㅣㅍㅎㅣㅎ"


@pytest.mark.parametrize("source,expected", [
    ("동해물", "ㄷㅗㅇㅎㅐㅁㅜㄹ"),
    ("Korean", "Korean"),
    ("한River", "ㅎㅏㄴRiver"),
    ("ㄳㄷㄷ", "ㄳㄷㄷ"),
    ("", ""),
])
def test_separate(source, expected):
    assert separate(source) == expected


def test_separate_char():
    assert separate_char("한") == "ㅎㅏㄴ"
    assert separate_char("?") == "?"


def test_extract_leading_basic():
    assert extract_leading("가나다라") == "ㄱㄴㄷㄹ"
    assert extract_leading("한글초성") == "ㅎㄱㅊㅅ"


@pytest.mark.parametrize("source,expected", [
    ("동해물과 백두산이", "ㄷㅎㅁㄱ ㅂㄷㅅㅇ"),
    ("하나2셋4", "ㅎㄴ2ㅅ4"),
    ("one투three포", "oneㅌthreeㅍ"),
    ("hello world", "hello world"),
    ("Korean초성", "Koreanㅊㅅ"),
])
def test_extract_leading_mixed_text(source, expected):
    assert extract_leading(source) == expected


@pytest.mark.parametrize("text", ["", "   ", "hello, world!", "0123456789", "\t\n"])
def test_ascii_text_is_left_alone(text):
    assert extract_leading(text) == text
    assert separate(text) == text


def test_extract_leading_keeps_length():
    text = "대한민국 2024 만세!"
    assert len(extract_leading(text)) == len(text)


def test_normalize_to_level1():
    assert normalize_to_level1("각") == "ㄱ"
    assert normalize_to_level1("ᄀ") == "ㄱ"
    assert normalize_to_level1("ㄱ") == "ㄱ"
    assert normalize_to_level1("ㅏ") == "ㅏ"
    assert normalize_to_level1("k") == "k"


def test_normalize_to_level2():
    assert normalize_to_level2("각") == "가"
    assert normalize_to_level2("갛") == "가"
    assert normalize_to_level2("가") == "가"
    assert normalize_to_level2("ㄱ") == "ㄱ"
    # one below the syllable block must not wrap onto '가'
    assert normalize_to_level2("꯿") == "꯿"


def test_normalize_medial():
    assert normalize_medial("국") == "ㅜ"
    assert normalize_medial("ᅡ") == "ㅏ"
    assert normalize_medial("ㅏ") == "ㅏ"
    assert normalize_medial("ㄱ") == "ㄱ"
    assert normalize_medial("z") == "z"
