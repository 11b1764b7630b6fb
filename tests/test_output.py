import io
import os

import pytest

from pipeflow.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_code():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    buf = io.StringIO()
    put_str("hello", buf)
    put_endl("world", buf)
    assert buf.getvalue() == "hello" + "world\n"


def test_put_nbr_min_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("value", [0, 7, 10, -5, 123456789])
def test_put_nbr_round_trip(value):
    buf = io.StringIO()
    put_nbr(value, buf)
    assert int(buf.getvalue()) == value


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_write_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_endl("piped", write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        assert reader.read() == b"piped\n"


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    assert capsys.readouterr().out == "to stdout"