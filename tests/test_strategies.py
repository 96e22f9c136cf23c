# tests/test_strategies.py
import pytest

from jamo_search.domain.matching import (
    CharComparatorStrategy,
    PredefinedComparators,
    StringSpecialComparator,
    char_equals,
    comparator_by_name,
    comparator_names,
    contains,
    equals,
    index_of,
    matches,
)


def test_default_is_jamo():
    assert PredefinedComparators.DEFAULT is PredefinedComparators.JAMO
    assert comparator_names() == ["jamo", "chosung", "joongsung", "exact"]


@pytest.mark.parametrize("strategy", PredefinedComparators.all())
def test_predefined_strategies_implement_the_protocol(strategy):
    assert isinstance(strategy, StringSpecialComparator)


def test_chosung_only_ignores_vowels_of_the_keyword():
    strategy = PredefinedComparators.CHOSUNG_ONLY
    assert contains("국수", "가서", strategy)
    assert not contains("국수", "가서")
    assert matches("비빔국수", "ㄱ사", strategy) == "국수"


def test_joongsung_only_compares_vowels():
    strategy = PredefinedComparators.JOONGSUNG_ONLY
    assert index_of("사과나무", "ㅏㅜ", strategy) == 2
    assert char_equals("국", "수", strategy)
    assert not char_equals("국", "가", strategy)
    assert equals("Hi", "Hi", strategy)


def test_exact_is_plain_string_search():
    strategy = PredefinedComparators.EXACT
    assert not contains("한글", "ㅎ", strategy)
    assert index_of("한글한글", "글한", strategy) == "한글한글".find("글한")


def test_custom_char_comparator_strategy():
    casefold = CharComparatorStrategy("casefold", lambda c, k: c.casefold() == k.casefold())
    assert matches("Korean", "kor", casefold) == "Kor"
    assert equals("KOREAN", "korean", casefold)
    assert casefold.equals("A", "a")


def test_plain_callables_are_accepted():
    assert index_of("abc", "B", lambda s, k: s.lower().find(k.lower())) == 1
    assert contains("abc", "z", lambda s, k: -1) is False
    assert equals("ab", "xy", lambda s, k: 0) is True
    assert equals("abc", "xy", lambda s, k: 0) is False
    assert matches("abc", "q", lambda s, k: "hit") == "hit"
    assert char_equals("a", "b", lambda c, k: True) is True


def test_comparator_by_name():
    assert comparator_by_name("jamo") is PredefinedComparators.JAMO
    assert comparator_by_name(" Chosung ") is PredefinedComparators.CHOSUNG_ONLY
    with pytest.raises(ValueError):
        comparator_by_name("soundex")
