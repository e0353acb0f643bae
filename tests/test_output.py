import io

import pytest

from cstrkit.output import put_char, put_endl, put_nbr, put_str


class _ShortWriter:
    def __init__(self):
        self.chunks = []

    def write(self, text):
        self.chunks.append(text)
        return 0


def test_put_char_writes_one_character():
    buf = io.StringIO()
    assert put_char("A", buf) == 1
    assert buf.getvalue() == "A"


def test_put_char_writes_nul():
    buf = io.StringIO()
    assert put_char("\0", buf) == 1
    assert buf.getvalue() == "\0"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_returns_length_written():
    buf = io.StringIO()
    count = put_str("Hello", buf)
    assert buf.getvalue() == "Hello"
    assert count == len(buf.getvalue())


def test_put_str_empty():
    buf = io.StringIO()
    assert put_str("", buf) == 0
    assert buf.getvalue() == ""


def test_put_str_none_raises():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    buf = io.StringIO()
    count = put_endl("Hello", buf)
    assert buf.getvalue() == "Hello\n"
    assert count == len(buf.getvalue())


def test_put_endl_none_raises():
    with pytest.raises(TypeError):
        put_endl(None, io.StringIO())


@pytest.mark.parametrize("n", [0, 1000, -1000, 2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    count = put_nbr(n, buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_put_nbr_out_of_range(n):
    with pytest.raises(OverflowError):
        put_nbr(n, io.StringIO())


def test_partial_write_raises():
    writer = _ShortWriter()
    with pytest.raises(OSError):
        put_str("data", writer)
    assert writer.chunks == ["data"]


def test_default_stream_is_stdout(capsys):
    put_str("out", None)
    assert capsys.readouterr().out == "out"