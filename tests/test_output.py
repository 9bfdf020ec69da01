import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("a", buf)
    put_char("\n", buf)
    assert buf.getvalue() == "a\n"


def test_put_char_rejects_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("Hello World\n", buf)
    assert buf.getvalue() == "Hello World\n"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Hello World", buf)
    assert buf.getvalue() == "Hello World\n"


@pytest.mark.parametrize("n", [0, 9, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min_text():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("9", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("Error")
    put_endl("")
    assert capsys.readouterr().out == "Error\n"