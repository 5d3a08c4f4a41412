import io

import pytest

from libfmt.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    assert put_char("a", buf) == 1
    assert buf.getvalue() == "a"


def test_put_char_accepts_byte_value():
    buf = io.StringIO()
    assert put_char(ord("Z"), buf) == 1
    assert buf.getvalue() == "Z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    assert put_char("q") == 1
    assert capsys.readouterr().out == "q"


@pytest.mark.parametrize("text", ["", "hello", "with\ttab", "multi\nline"])
def test_put_str_returns_length_and_writes_text(text):
    buf = io.StringIO()
    assert put_str(text, buf) == len(text)
    assert buf.getvalue() == text


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    assert put_str(None, buf) == 0
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    assert put_endl("line", buf) == len("line") + 1
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    assert put_endl(None, buf) == 0
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 10, 42, -1, -987654, 2147483647, -2147483648])
def test_put_nbr_round_trips_32_bit_values(n):
    buf = io.StringIO()
    count = put_nbr(n, buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())


def test_put_nbr_wraps_beyond_32_bits():
    buf = io.StringIO()
    put_nbr(2147483648, buf)
    assert buf.getvalue() == str(-2147483648)


def test_successive_writes_accumulate():
    buf = io.StringIO()
    put_str("n=", buf)
    put_nbr(5, buf)
    put_char("!", buf)
    assert buf.getvalue() == "n=5!"