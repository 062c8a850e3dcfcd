import pytest

from katas.wheel import get_price


@pytest.mark.parametrize(
    "lines, guesses, expected",
    [
        (["BUILDLEV", "EATREALROBOT"], "ERABCDFGHIJKLMNOPQSTUVWXYZ", 6500),
        (["ABS", "ABS", "AAAAAKBA"], "XASBKQDJHMNPTLVUCGEWFORIYZ", 9500),
        (["ABXCVS", "ABS", "TEWRAAA"], "LVXMNPTIKQASBDUCGEWFORJHYZ", 6400),
    ],
)
def test_source_cases(lines, guesses, expected):
    assert get_price(lines, guesses) == expected


def test_no_guesses_no_prize():
    assert get_price(["ABC"], "") == 0


def test_all_misses_no_prize():
    assert get_price(["ABC"], "XYZ") == 0


def test_repeated_guess_pays_nothing_more():
    lines = ["BUILDLEV", "EATREALROBOT"]
    once = get_price(lines, "ERA")
    assert get_price(lines, "ERAERA") >= once
    assert get_price(lines, "ERAQ") == once


def test_calls_are_independent():
    lines = ["ABS", "ABS", "AAAAAKBA"]
    guesses = "XASBKQDJHMNPTLVUCGEWFORIYZ"
    first = get_price(lines, guesses)
    second = get_price(lines, guesses)
    assert first == 9500
    assert second == 9500