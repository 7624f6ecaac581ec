import io

import pytest

from solongmaze.fdio import put_char, put_endl, put_number, put_str


def test_put_char():
    out = io.StringIO()
    put_char("a", out)
    put_char("b", out)
    assert out.getvalue() == "ab"


def test_put_char_rejects_long_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    out = io.StringIO()
    put_str("hello", out)
    put_str("", out)
    assert out.getvalue() == "hello"


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize(
    "number, expected",
    [(0, "0"), (42, "42"), (-7, "-7"), (-2147483648, "-2147483648"), (2147483647, "2147483647")],
)
def test_put_number(number, expected):
    out = io.StringIO()
    put_number(number, out)
    assert out.getvalue() == expected


def test_put_number_rejects_non_integer():
    with pytest.raises(TypeError):
        put_number("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_endl("shown")
    assert capsys.readouterr().out == "shown\n"