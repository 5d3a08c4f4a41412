"""Character classes and conversions between text and integers."""

_WHITESPACE = " \t\n\r\v\f"
_REMOVABLE = frozenset(" \t\n")
_BASE_DIGITS = "0123456789abcdef"
_U32 = 1 << 32
_U64 = 1 << 64


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit.  The value wraps as a 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = (value * 10 + ord(ch) - ord("0")) % _U32
    value = (sign * value) % _U32
    return value - _U32 if value >= _U32 // 2 else value


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus when negative."""
    return str(n)


def itoa_base(value: int, base: int) -> str:
    """Lowercase text of an unsigned 64-bit value in a base from 2 to 16."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    value %= _U64
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_BASE_DIGITS[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def remove_whitespace(text: str) -> str:
    """Drop spaces, tabs and newlines."""
    return "".join(ch for ch in text if ch not in _REMOVABLE)


def join_all(*args: str) -> str:
    """Concatenate one or more strings."""
    if not args:
        raise ValueError("join_all needs at least one string")
    return "".join(args)