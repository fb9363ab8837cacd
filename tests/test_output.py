import io

import pytest

from wirefdf.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    stream = io.StringIO()
    put_char("a", stream)
    assert stream.getvalue() == "a"


def test_put_char_accepts_code():
    stream = io.StringIO()
    put_char(ord("Z"), stream)
    assert stream.getvalue() == "Z"


def test_put_char_rejects_longer_string():
    stream = io.StringIO()
    with pytest.raises(ValueError):
        put_char("ab", stream)


def test_put_str_writes_text():
    stream = io.StringIO()
    put_str("fail in mlx init", stream)
    assert stream.getvalue() == "fail in mlx init"


def test_put_str_none_writes_nothing():
    stream = io.StringIO()
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline():
    text = "Error when adding lines"
    stream = io.StringIO()
    put_endl(text, stream)
    assert stream.getvalue() == text + "\n"


def test_put_endl_none_writes_nothing():
    stream = io.StringIO()
    put_endl(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_empty_string_writes_newline():
    stream = io.StringIO()
    put_endl("", stream)
    assert stream.getvalue() == "\n"


def test_put_nbr_int_min():
    stream = io.StringIO()
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_put_nbr_int_max():
    stream = io.StringIO()
    put_nbr(2147483647, stream)
    assert stream.getvalue() == "2147483647"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -99, 1031797530])
def test_put_nbr_round_trips(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n


def test_consecutive_writes_accumulate():
    stream = io.StringIO()
    put_str("x=", stream)
    put_nbr(5, stream)
    put_char("\n", stream)
    assert stream.getvalue() == "x=5\n"