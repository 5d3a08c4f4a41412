"""Exact decimal rendering of floating-point values for the ``f`` conversion."""

import math

from libfmt.digits import add_decimal
from libfmt.spec import Flag, FormatSpec

FRACTION_DIGITS = 63
DEFAULT_PRECISION = 6

_DIGITS = frozenset("0123456789")


def _split_sign(integer_part: str) -> tuple[str, str]:
    sign = "-" if integer_part.startswith("-") else ""
    digits = integer_part[len(sign):]
    if not digits or not _DIGITS.issuperset(digits):
        raise ValueError(f"not an integer part: {integer_part!r}")
    return sign, digits


def exact_decimal(value: float) -> tuple[str, str]:
    """Split a finite float into its exact decimal integer and fraction digits.

    The integer part carries a leading minus when the sign bit is set, so
    negative zero gives ``"-0"``.  The fraction is exact and right-padded
    with zeros to at least 63 digits.
    """
    if math.isinf(value) or math.isnan(value):
        raise ValueError(f"no decimal expansion for {value!r}")
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    numerator, denominator = abs(value).as_integer_ratio()
    integer, remainder = divmod(numerator, denominator)
    places = denominator.bit_length() - 1
    fraction = str(remainder * 5**places).rjust(places, "0") if places else ""
    return sign + str(integer), fraction.ljust(FRACTION_DIGITS, "0")


def _rounds_up(fraction: str, precision: int, last_kept: str) -> bool:
    if precision >= len(fraction):
        return False
    digit = fraction[precision]
    if digit != "5":
        return digit > "5"
    if fraction[precision + 1:].strip("0"):
        return True
    return int(last_kept) % 2 == 1


def round_fraction(
    integer_part: str, fraction: str, spec: FormatSpec, precision: int
) -> str:
    """Round an exact decimal to ``precision`` fraction digits.

    Ties go to the even digit.  The point is written when there are
    fraction digits or the ``#`` flag is set; a carry out of the fraction
    increases the integer part.
    """
    if precision < 0:
        raise ValueError(f"negative precision: {precision}")
    if not _DIGITS.issuperset(fraction):
        raise ValueError(f"not a string of fraction digits: {fraction!r}")
    sign, digits = _split_sign(integer_part)

    kept = fraction[:precision]
    if len(kept) < precision:
        kept = kept.ljust(precision, "0")
    elif _rounds_up(fraction, precision, kept[-1] if precision else digits[-1]):
        if precision:
            kept = add_decimal(kept, "1")
            if len(kept) > precision:
                kept = kept[1:]
                digits = add_decimal(digits, "1")
        else:
            digits = add_decimal(digits, "1")

    text = sign + digits
    if precision or Flag.HASH in spec.flags:
        text += "."
    return text + kept


def format_float(value: float, spec: FormatSpec) -> str:
    """Render a float for an ``f`` directive, before any width padding.

    Infinities give ``inf`` and ``-inf``, any NaN gives ``nan``.  A
    negative precision stands for the default of six digits.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    precision = spec.precision if spec.precision >= 0 else DEFAULT_PRECISION
    integer_part, fraction = exact_decimal(value)
    return round_fraction(integer_part, fraction, spec, precision)