"""printf-style formatting of integers, strings, characters and floats."""

from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any

from libfmt.chars import itoa, itoa_base
from libfmt.floats import format_float
from libfmt.output import put_str
from libfmt.spec import Flag, FormatSpec, parse_spec

_BASES = {"o": 8, "x": 16, "X": 16, "p": 16, "u": 10}
_SIGNS = frozenset("-+ ")
_SIGNED = frozenset("di")


def _wrap(value: int, bits: int, signed: bool) -> int:
    value %= 1 << bits
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _pad(text: str, count: int, fill: str, left: bool) -> str:
    padding = fill * max(count, 0)
    return padding + text if left else text + padding


def _join_sign(spec: FormatSpec, text: str, count: int) -> str:
    """Zero-pad the digits of ``text`` by ``count`` and put the sign in front."""
    if "nan" in text:
        return text
    first = text[:1]
    if first and first in _SIGNS:
        sign, body = first, text[1:]
    else:
        sign, body = "", text
    unsigned = spec.specifier == "u"
    if Flag.PLUS in spec.flags and first != "-" and not unsigned:
        sign = "+"
    elif Flag.SPACE in spec.flags and first not in ("-", "+") and not unsigned:
        sign = " "
    if Flag.PLUS in spec.flags and first not in ("-", "+"):
        count -= 1
    return sign + _pad(body, count, "0", left=True)


def _apply_precision(spec: FormatSpec, text: str) -> str:
    original_len = len(text)
    if spec.precision == 0 and text.startswith("0") and spec.specifier != "f":
        text = ""
    if spec.specifier in ("x", "X", "u") and not text:
        return text
    count = -1
    if spec.precision >= original_len and spec.specifier != "f":
        count = spec.precision - original_len
        if Flag.PLUS in spec.flags or text.startswith("-"):
            count += 1
    elif 0 <= spec.precision < original_len and spec.specifier == "s":
        text = text[: spec.precision]
    text = _join_sign(spec, text, count)
    if spec.specifier == "o" and Flag.HASH in spec.flags and not text.startswith("0"):
        text = "0" + text
    return text


def apply_width(spec: FormatSpec, text: str) -> str:
    """Apply the precision, sign and width rules of ``spec`` to converted text."""
    text = _apply_precision(spec, text)
    missing = spec.width - len(text)
    if missing > 0:
        if Flag.MINUS in spec.flags:
            return _pad(text, missing, " ", left=False)
        if Flag.ZERO in spec.flags and "inf" not in text and "nan" not in text:
            return _join_sign(spec, text, missing)
        return _pad(text, missing, " ", left=True)
    return text


def _next_arg(spec: FormatSpec, args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec.specifier}") from None


def _signed_bits(flags: Flag) -> int:
    if Flag.LL in flags or Flag.LONG in flags:
        return 64
    if Flag.HH in flags:
        return 8
    if Flag.H in flags:
        return 16
    return 32


def _unsigned_bits(spec: FormatSpec) -> int:
    if Flag.LL in spec.flags or spec.specifier == "p":
        return 64
    return _signed_bits(spec.flags)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_char(spec: FormatSpec, value: Any) -> str:
    ch = _char(value)
    if spec.width > 0:
        padding = " " * max(spec.width - 1, 0)
        return ch + padding if Flag.MINUS in spec.flags else padding + ch
    return ch


def _format_string(spec: FormatSpec, value: Any) -> str:
    text = "(null)" if value is None else str(value)
    if 0 <= spec.precision < len(text):
        text = text[: spec.precision]
    if spec.width > 0:
        return _pad(text, spec.width - len(text), " ", left=Flag.MINUS not in spec.flags)
    return text


def format_directive(spec: FormatSpec, args: Iterable[Any]) -> str:
    """Render one parsed directive, taking the arguments it needs from ``args``.

    ``args`` should be an iterator shared across directives; the values a
    directive uses are consumed from it.  Raises ``TypeError`` when it runs out.
    """
    arg_iter = args if isinstance(args, Iterator) else iter(args)
    conv = spec.specifier
    if conv and conv in _SIGNED:
        value = _wrap(int(_next_arg(spec, arg_iter)), _signed_bits(spec.flags), True)
        return apply_width(spec, itoa(value))
    if conv in _BASES:
        value = _wrap(int(_next_arg(spec, arg_iter)), _unsigned_bits(spec), False)
        text = itoa_base(value, _BASES[conv])
        if conv == "X":
            text = text.upper()
        return apply_width(spec, text)
    if conv == "s":
        return _format_string(spec, _next_arg(spec, arg_iter))
    if conv == "c":
        return _format_char(spec, _next_arg(spec, arg_iter))
    if conv == "f":
        return apply_width(spec, format_float(float(_next_arg(spec, arg_iter)), spec))
    if not conv:
        return ""
    plain = replace(spec, flags=spec.flags & ~(Flag.SPACE | Flag.PLUS))
    return apply_width(plain, conv)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    arg_iter = iter(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        pct = fmt.find("%", pos)
        if pct < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:pct])
        if pct + 1 >= len(fmt):
            break
        spec = parse_spec(fmt[pct:])
        pieces.append(format_directive(spec, arg_iter))
        pos = pct + spec.length
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    return put_str(sprintf(fmt, *args))