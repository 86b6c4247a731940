import pytest

from devshell.strcompare import contains, equals, iequals, to_lower


@pytest.mark.parametrize("s", ["", "abc", "Hello World", "MiXeD 123 !?"])
def test_equals_reflexive(s):
    assert equals(s, s) is True


@pytest.mark.parametrize(
    "a, b",
    [("abc", "abd"), ("abc", "abcd"), ("", "a"), ("abc", "ABC")],
)
def test_equals_rejects_differences(a, b):
    assert equals(a, b) is False
    assert equals(b, a) is False


def test_iequals_matches_case_variants():
    assert iequals("true", "TRUE") is True
    assert iequals("False", "fALSE") is True
    assert iequals("", "") is True


@pytest.mark.parametrize("s", ["true", "Some Text", "x1Y2z3"])
def test_iequals_with_upper_and_lower_forms(s):
    assert iequals(s, s.upper())
    assert iequals(s.lower(), s)


def test_iequals_rejects_different_length():
    assert iequals("true", "truee") is False
    assert iequals("a", "") is False


def test_iequals_rejects_different_letters():
    assert iequals("true", "fals") is False


def test_to_lower_pinned_value():
    assert to_lower("HeLLo, WORLD 42") == "hello, world 42"


@pytest.mark.parametrize("s", ["", "ABC", "already lower", "Mixed_Case-09", "ÄÖÜ"])
def test_to_lower_invariants(s):
    lowered = to_lower(s)
    assert len(lowered) == len(s)
    assert to_lower(lowered) == lowered
    assert iequals(lowered, s)


def test_to_lower_leaves_non_ascii_alone():
    assert to_lower("ÄB") == "Äb"


def test_contains_present_and_absent():
    assert contains("hello", "e") is True
    assert contains("hello", "z") is False
    assert contains("", "a") is False


@pytest.mark.parametrize("s", ["a b\n", "line\n"])
def test_contains_each_own_char(s):
    assert all(contains(s, ch) for ch in s)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_contains_requires_single_char(bad):
    with pytest.raises(ValueError):
        contains("abc", bad)