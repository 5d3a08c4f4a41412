"""Writing characters, strings and integers to a text stream."""

import sys
from typing import TextIO

_U32 = 1 << 32
_I32_MIN = -(1 << 31)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character and return the count written, always 1.

    An integer is taken as a byte value and reduced to 0..255.
    """
    if isinstance(c, int):
        ch = chr(c & 0xFF)
    elif len(c) == 1:
        ch = c
    else:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(ch)
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write a string and return its length; ``None`` writes nothing."""
    if text is None:
        return 0
    _target(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if text is None:
        return 0
    _target(stream).write(text + "\n")
    return len(text) + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write an integer in decimal, wrapped to a signed 32-bit value.

    Returns the number of characters written.
    """
    value = (n - _I32_MIN) % _U32 + _I32_MIN
    return put_str(str(value), stream)