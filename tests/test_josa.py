import os
from pathlib import Path

import pytest

from jamo_search.domain.enums import JosaType
from jamo_search.domain.josa import append_josa, append_josa_type
from jamo_search.domain.josa_data import DEFAULT_JOSA_PAIRS, get_josa_pair


def test_append_josa_picks_form_by_final_consonant():
    assert append_josa("책", "은", "는") == "책은"
    assert append_josa("사과", "은", "는") == "사과는"


@pytest.mark.parametrize("word", ["Python", "2024", "   ", ""])
def test_append_josa_leaves_other_words_alone(word):
    assert append_josa(word, "은", "는") == word


@pytest.mark.parametrize("word,josa_type,expected", [
    ("사과", JosaType.YG, "사과가"),
    ("책", JosaType.YG, "책이"),
    ("책", JosaType.EN, "책은"),
    ("밥", JosaType.ER, "밥을"),
    ("커피", JosaType.ER, "커피를"),
    ("책", JosaType.WG, "책과"),
    ("사과", JosaType.WG, "사과와"),
    ("학생", JosaType.YDD, "학생이다"),
    ("의사", JosaType.YDD, "의사다"),
    ("집", JosaType.ERR, "집으로"),
    ("바다", JosaType.ERR, "바다로"),
    ("서울", JosaType.ERR, "서울로"),
])
def test_append_josa_type(word, josa_type, expected, tmp_path: Path):
    # point at a missing file so only the built-in pairs are used
    assert append_josa_type(word, josa_type, tmp_path / "missing.yaml") == expected


def test_bundled_josa_yaml_matches_defaults():
    for josa_type, pair in DEFAULT_JOSA_PAIRS.items():
        assert get_josa_pair(josa_type) == pair


def test_josa_yaml_overrides(tmp_path: Path):
    path = tmp_path / "josa.yaml"
    path.write_text(
        "josa:\n"
        "  en: {jongsung: 은요, vowel: 는요}\n"
        "  yg: [only-one]\n",
        encoding="utf-8",
    )
    assert get_josa_pair(JosaType.EN, path) == ("은요", "는요")
    assert get_josa_pair(JosaType.YG, path) == ("이", "가")
    assert append_josa_type("책", JosaType.EN, path) == "책은요"


def test_malformed_josa_yaml_falls_back(tmp_path: Path):
    path = tmp_path / "josa.yaml"
    path.write_text("josa: [unclosed\n", encoding="utf-8")
    assert get_josa_pair(JosaType.ER, path) == ("을", "를")


def test_josa_yaml_is_cached_until_mtime_changes(tmp_path: Path):
    path = tmp_path / "josa.yaml"
    path.write_text("josa:\n  en: [은요, 는요]\n", encoding="utf-8")
    first = path.stat().st_mtime_ns
    assert get_josa_pair(JosaType.EN, path) == ("은요", "는요")

    # same mtime: the cached table is still served
    path.write_text("josa:\n  en: [은데, 는데]\n", encoding="utf-8")
    os.utime(path, ns=(first, first))
    assert get_josa_pair(JosaType.EN, path) == ("은요", "는요")

    # newer mtime: the file is read again
    os.utime(path, ns=(first + 1_000_000_000, first + 1_000_000_000))
    assert get_josa_pair(JosaType.EN, path) == ("은데", "는데")
