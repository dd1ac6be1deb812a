import pytest

from gostudy.conversion import (
    base_to_base,
    base_to_dec,
    base_to_dec_alt,
    dec_to_base,
    dec_to_base_alt,
)

CASES = [
    (1, 2, "1"),
    (2, 2, "10"),
    (7, 3, "21"),
    (14, 2, "1110"),
    (14, 16, "E"),
    (17, 16, "11"),
    (3735928559, 2, "11011110101011011011111011101111"),
    (3735928559, 3, "100122100210211112102"),
    (3735928559, 5, "30122344203214"),
    (3735928559, 6, "1414413525315"),
    (3735928559, 7, "161402603666"),
    (3735928559, 8, "33653337357"),
    (3735928559, 9, "10570724472"),
    (3735928559, 10, "3735928559"),
    (3735928559, 11, "164791A470"),
    (3735928559, 12, "8831A383B"),
    (3735928559, 13, "476CC321C"),
    (3735928559, 14, "276253DDD"),
    (3735928559, 15, "16CEB1BDE"),
    (3735928559, 16, "DEADBEEF"),
]


@pytest.mark.parametrize("dec, base, text", CASES)
def test_base_to_dec(dec, base, text):
    assert base_to_dec(text, base) == dec


@pytest.mark.parametrize("dec, base, text", CASES)
def test_base_to_dec_alt(dec, base, text):
    assert base_to_dec_alt(text, base) == dec


@pytest.mark.parametrize("dec, base, text", CASES)
def test_dec_to_base(dec, base, text):
    assert dec_to_base(dec, base) == text


@pytest.mark.parametrize("dec, base, text", CASES)
def test_dec_to_base_alt(dec, base, text):
    assert dec_to_base_alt(dec, base) == text


@pytest.mark.parametrize("base", range(2, 17))
def test_round_trip(base):
    value = 3735928559
    assert base_to_dec(dec_to_base(value, base), base) == value


@pytest.mark.parametrize(
    "value, base, new_base, want",
    [
        ("E", 16, 2, "1110"),
        ("11011110101011011011111011101111", 2, 3, "100122100210211112102"),
        ("8831A383B", 12, 16, "DEADBEEF"),
    ],
)
def test_base_to_base(value, base, new_base, want):
    assert base_to_base(value, base, new_base) == want


def test_base_to_base_through_base_four_round_trip():
    quaternary = base_to_base("3735928559", 10, 4)
    assert base_to_base(quaternary, 4, 10) == "3735928559"


def test_base_to_dec_empty_is_zero():
    assert base_to_dec("", 16) == 0


def test_dec_to_base_zero_is_empty():
    assert dec_to_base(0, 2) == ""


def test_base_to_dec_rejects_lowercase():
    with pytest.raises(ValueError):
        base_to_dec("e", 16)


def test_base_to_dec_alt_accepts_lowercase():
    assert base_to_dec_alt("deadbeef", 16) == 3735928559


def test_base_to_dec_alt_rejects_bad_digit():
    with pytest.raises(ValueError):
        base_to_dec_alt("1G", 16)


@pytest.mark.parametrize("base", [0, 1, 17])
def test_dec_to_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        dec_to_base(10, base)