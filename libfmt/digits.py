"""Arbitrary-precision arithmetic on strings of decimal digits."""

_DIGITS = frozenset("0123456789")


def _check(*operands: str) -> None:
    for operand in operands:
        if not _DIGITS.issuperset(operand):
            raise ValueError(f"not a string of decimal digits: {operand!r}")


def add_decimal(a: str, b: str) -> str:
    """Add two digit strings.

    The result keeps the width of the longer operand, so leading zeros
    survive; it is one digit wider only when the sum carries out.
    """
    _check(a, b)
    width = max(len(a), len(b))
    total = int(a or "0") + int(b or "0")
    if total == 0:
        return "0" * width
    return str(total).rjust(width, "0")


def multiply_decimal(a: str, b: str) -> str:
    """Multiply two digit strings; leading zeros are dropped, keeping one digit."""
    _check(a, b)
    if not a and not b:
        return ""
    return str(int(a or "0") * int(b or "0"))


def power_decimal(base: str, n: int) -> str:
    """Raise a digit string to a non-negative integer power.

    A power of zero gives "1"; a power of one gives the base unchanged.
    """
    _check(base)
    if n < 0:
        raise ValueError(f"negative exponent: {n}")
    if n == 0:
        return "1"
    if n == 1:
        return base
    return str(int(base or "0") ** n)