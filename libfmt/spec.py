"""Parsing of a single printf-style conversion directive."""

import enum
from dataclasses import dataclass

from libfmt.chars import atoi, is_digit

_NON_SPECIFIERS = frozenset("0-+#.hlL ")
_FLAG_CHARS = frozenset("0#+- ")
_MODIFIER_CHARS = frozenset("lhL")


class Flag(enum.IntFlag):
    """Flags and length modifiers of a conversion directive."""

    ZERO = 1
    HASH = 2
    SPACE = 4
    PLUS = 8
    MINUS = 16
    LONG = 32
    LL = 64
    H = 128
    HH = 256
    L_D = 512


@dataclass
class FormatSpec:
    """A parsed directive.

    ``specifier`` is empty when the directive has none; ``length`` is the
    number of characters the directive spans, the ``%`` included.
    """

    flags: Flag = Flag(0)
    specifier: str = ""
    precision: int = -1
    width: int = -1
    length: int = 0


def _find_specifier(directive: str) -> tuple[str, int]:
    for offset, ch in enumerate(directive[1:], start=1):
        if ch not in _NON_SPECIFIERS and not is_digit(ch):
            return ch, offset + 1
    return "", len(directive)


def _parse_flags(directive: str) -> tuple[Flag, int]:
    flags = Flag(0)
    pos = 1
    for ch in directive[1:]:
        if ch not in _FLAG_CHARS:
            break
        if ch == "0":
            if Flag.MINUS not in flags:
                flags |= Flag.ZERO
        elif ch == "#":
            flags |= Flag.HASH
        elif ch == " ":
            if Flag.PLUS not in flags:
                flags |= Flag.SPACE
        elif ch == "+":
            flags = (flags & ~Flag.SPACE) | Flag.PLUS
        else:
            flags = (flags & ~Flag.ZERO) | Flag.MINUS
        pos += 1
    return flags, pos


def _skip_digits(directive: str, pos: int) -> int:
    while pos < len(directive) and is_digit(directive[pos]):
        pos += 1
    return pos


def _parse_modifiers(directive: str, pos: int) -> Flag:
    flags = Flag(0)
    while pos < len(directive) and directive[pos] in _MODIFIER_CHARS:
        ch = directive[pos]
        doubled = directive[pos + 1 : pos + 2] == ch
        if ch == "l":
            flags |= Flag.LL if doubled else Flag.LONG
        elif ch == "h":
            flags |= Flag.HH if doubled else Flag.H
        else:
            flags |= Flag.L_D
        pos += 1
    return flags


def parse_spec(directive: str) -> FormatSpec:
    """Parse the directive at the start of ``directive``, which begins with ``%``."""
    if not directive.startswith("%"):
        raise ValueError(f"a directive starts with '%', got {directive!r}")
    specifier, length = _find_specifier(directive)
    flags, pos = _parse_flags(directive)

    width = atoi(directive[pos:])
    pos = _skip_digits(directive, pos)

    precision = -1
    if directive[pos : pos + 1] == ".":
        dot = pos
        pos = _skip_digits(directive, pos + 1)
        precision = atoi(directive[dot + 1 : dot + 1 + pos])
        if Flag.ZERO in flags and specifier != "f":
            flags &= ~Flag.ZERO
    if specifier == "f" and precision < 0:
        precision = 6

    flags |= _parse_modifiers(directive, pos)
    return FormatSpec(
        flags=flags,
        specifier=specifier,
        precision=precision,
        width=width,
        length=length,
    )