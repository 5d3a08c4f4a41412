import random
from decimal import Decimal

import pytest

from libfmt.floats import exact_decimal, format_float, round_fraction
from libfmt.spec import Flag, FormatSpec


def _spec(precision=6, flags=Flag(0)):
    return FormatSpec(flags=flags, specifier="f", precision=precision)


SAMPLE_VALUES = [
    0.0,
    -0.0,
    0.5,
    -0.5,
    1.5,
    2.5,
    -2.5,
    0.125,
    0.1,
    -0.01,
    3.14159,
    9.999999,
    -9.7,
    123456.789,
    1e-7,
    1e20,
    -1e300,
    2.0**-30,
    5e-324,
    1.7976931348623157e308,
]


def test_exact_decimal_of_half():
    assert exact_decimal(0.5) == ("0", "5" + "0" * 62)


def test_exact_decimal_keeps_sign_of_negative_zero():
    assert exact_decimal(-0.0) == ("-0", "0" * 63)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_exact_decimal_is_exact(value):
    integer_part, fraction = exact_decimal(value)
    assert Decimal(f"{integer_part}.{fraction}") == Decimal(value)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_exact_decimal_fraction_has_at_least_63_digits(value):
    _, fraction = exact_decimal(value)
    assert len(fraction) >= 63
    assert set(fraction) <= set("0123456789")


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_exact_decimal_rejects_non_finite(value):
    with pytest.raises(ValueError):
        exact_decimal(value)


@pytest.mark.parametrize(
    "integer_part, fraction, precision",
    [
        ("1", "25", 1),
        ("1", "35", 1),
        ("1", "251", 1),
        ("0", "5", 0),
        ("1", "5", 0),
        ("2", "5", 0),
        ("9", "96", 1),
        ("-9", "7", 0),
        ("-9", "99", 1),
        ("-0", "4", 0),
        ("12", "3456", 2),
        ("7", "", 3),
        ("0", "0005", 3),
        ("0", "0015", 3),
    ],
)
def test_round_fraction_rounds_half_to_even(integer_part, fraction, precision):
    expected = format(Decimal(f"{integer_part}.{fraction or '0'}"), f".{precision}f")
    assert round_fraction(integer_part, fraction, _spec(precision), precision) == expected


def test_round_fraction_carry_into_integer_part():
    assert round_fraction("99", "96", _spec(1), 1) == "100.0"


def test_round_fraction_pads_short_fraction():
    result = round_fraction("3", "5", _spec(5), 5)
    assert result == "3.5" + "0" * 4


def test_round_fraction_hash_keeps_point():
    spec = _spec(0, Flag.HASH)
    assert round_fraction("4", "2", spec, 0) == "4."


def test_round_fraction_rejects_negative_precision():
    with pytest.raises(ValueError):
        round_fraction("1", "5", _spec(), -1)


@pytest.mark.parametrize(
    "integer_part, fraction", [("", "5"), ("1a", "5"), ("1", "5x"), ("--1", "0")]
)
def test_round_fraction_rejects_bad_digits(integer_part, fraction):
    with pytest.raises(ValueError):
        round_fraction(integer_part, fraction, _spec(2), 2)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
@pytest.mark.parametrize("precision", [0, 1, 2, 6, 17, 70])
def test_format_float_matches_correct_rounding(value, precision):
    assert format_float(value, _spec(precision)) == f"{value:.{precision}f}"


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_format_float_hash_with_zero_precision(value):
    spec = _spec(0, Flag.HASH)
    assert format_float(value, spec) == f"{value:#.0f}"


def test_format_float_random_values():
    rng = random.Random(1234)
    for _ in range(300):
        value = rng.uniform(-1e6, 1e6) * 10.0 ** rng.randint(-8, 8)
        precision = rng.randint(0, 20)
        assert format_float(value, _spec(precision)) == f"{value:.{precision}f}"


def test_format_float_default_precision():
    unset = FormatSpec(specifier="f")
    assert format_float(1.5, unset) == format_float(1.5, _spec(6))
    assert len(format_float(1.5, unset).split(".")[1]) == 6


def test_format_float_tiny_value_full_expansion():
    value = 5e-324
    assert format_float(value, _spec(1100)) == f"{value:.1100f}"


@pytest.mark.parametrize(
    "value, expected",
    [(float("inf"), "inf"), (float("-inf"), "-inf"), (float("nan"), "nan")],
)
def test_format_float_non_finite(value, expected):
    assert format_float(value, _spec()) == expected


def test_format_float_negative_nan_has_no_sign():
    assert format_float(-float("nan"), _spec()) == "nan"


def test_format_float_negative_zero_keeps_sign():
    assert format_float(-0.0, _spec(2)).startswith("-0")