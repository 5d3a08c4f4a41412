# libfmt

A small, dependency-free formatting library: a `printf`-style formatter with
its own rules for flags, width, precision and length modifiers, exact decimal
rendering of floating-point values, arithmetic on decimal digit strings, and a
handful of character and integer conversion helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`libfmt.printf` provides `sprintf`, which returns the formatted text, and
`printf`, which writes it to standard output and returns the number of
characters written.

```python
from libfmt.printf import sprintf, printf

sprintf("%5d|%-5s|%x", 42, "ab", 255)   # '   42|ab   |ff'
sprintf("%+.3f", 3.14159)               # '+3.142'
sprintf("%#o", 8)                       # '010'

count = printf("hello %s\n", "world")   # writes to stdout, returns 12
```

Conversions: `d`, `i`, `u`, `o`, `x`, `X`, `p`, `c`, `s` and `f`. Any other
character after the flags, width and precision is printed as itself, so `%%`
gives `%`. The flags `-`, `+`, space, `0` and `#`, a field width, a precision
and the length modifiers `hh`, `h`, `l`, `ll` and `L` are recognised.

Integer arguments are wrapped to the width a C implementation would use: 32
bits by default, 8 bits with `hh`, 16 with `h`, 64 with `l` or `ll` (and
always 64 for `p`). `s` prints `(null)` for `None`. Running out of arguments
raises `TypeError`.

A single directive can be parsed and rendered on its own. `parse_spec`
returns a `FormatSpec` dataclass with `flags` (a `Flag` enum), `specifier`,
`precision`, `width` and `length`; `format_directive` takes its arguments
from an iterable; `apply_width` applies the precision, sign and width rules
to text that is already converted.

```python
from libfmt.spec import parse_spec
from libfmt.printf import format_directive

spec = parse_spec("%08.3f")
format_directive(spec, [2.5])           # '0002.500'
```

## Floats

`libfmt.floats` renders a float from its exact binary value.
`exact_decimal` splits a finite float into its exact integer digits (with a
leading `-` when the sign bit is set) and fraction digits padded to at least
63 places. `round_fraction` rounds such a pair to a given precision, with
ties going to the even digit. `format_float` combines the two for an `f`
directive, giving `inf`, `-inf` or `nan` for the special values.

## Decimal-string arithmetic

`libfmt.digits` offers `add_decimal`, `multiply_decimal` and `power_decimal`,
which work on non-negative integers written as strings of decimal digits and
raise `ValueError` for anything else.

## Helpers

`libfmt.chars` provides `atoi` (C-style, wrapping to 32 bits), `itoa`,
`itoa_base` (bases 2 to 16, lowercase), the predicates `is_alpha`,
`is_digit`, `is_alnum`, `is_ascii` and `is_print`, `remove_whitespace` and
`join_all`.

`libfmt.output` provides `put_char`, `put_str`, `put_endl` and `put_nbr`,
each writing to a text stream (standard output by default) and returning the
number of characters written.

## What it does not do

libfmt is a library only; it installs no command-line program. It formats
into Python strings and text streams and does not support positional
arguments, `*` widths or the `e`, `g` and `a` float conversions.