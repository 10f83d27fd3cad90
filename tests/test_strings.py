import pytest

from algocourse.strings import compare, compare_prefix, comparison_report

S0 = "aaaaa"
S1 = "bbbbb"
S2 = "aaaaaaa"


def test_compare_equal():
    assert compare(S0, S0) == 0


def test_compare_ordering():
    assert compare(S0, S1) < 0
    assert compare(S1, S0) > 0
    assert compare(S0, S2) < 0


@pytest.mark.parametrize("a,b", [(S0, S1), (S1, S2), (S0, S2), ("", "a")])
def test_compare_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)
    assert compare(a, b) in (-1, 1)


def test_compare_prefix():
    assert compare_prefix(S0, S0, 3) == 0
    assert compare_prefix(S0, S1, 3) < 0
    assert compare_prefix(S1, S0, 3) > 0
    assert compare_prefix(S0, S2, 3) == 0


def test_compare_prefix_zero_length_is_equal():
    assert compare_prefix(S0, S1, 0) == 0


def test_compare_prefix_negative():
    with pytest.raises(ValueError):
        compare_prefix(S0, S1, -1)


def test_report_full_compare():
    report = comparison_report([(S0, S0), (S0, S1), (S1, S0), (S0, S2)])
    lines = report.splitlines()
    assert lines[0] == "strcmp(str1, str2)"
    assert lines[1] == f"[{S0}] [{S0}] (0)"
    assert lines[2] == f"[{S0}] [{S1}] ({compare(S0, S1)})"
    assert len(lines) == 5


def test_report_prefix_compare():
    report = comparison_report([(S0, S2)], 3)
    lines = report.splitlines()
    assert lines[0] == "strncmp(str1, str2, 3)"
    assert lines[1] == f"[{S0}] [{S2}] (0)"