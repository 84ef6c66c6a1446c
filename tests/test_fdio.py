import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pfmt.fdio import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


def _capture(action):
    """Run ``action(fd)`` against a pipe and return everything it wrote."""
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
    finally:
        os.close(write_fd)
    chunks = []
    try:
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_fd)
    return b"".join(chunks)


def test_put_char_str():
    assert _capture(lambda fd: put_char_fd("x", fd)) == b"x"


def test_put_char_int_truncates_to_byte():
    assert _capture(lambda fd: put_char_fd(ord("A") + 256, fd)) == b"A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char_fd("ab", 1)


def test_put_str():
    assert _capture(lambda fd: put_str_fd("hello world", fd)) == b"hello world"


def test_put_str_bytes():
    assert _capture(lambda fd: put_str_fd(b"raw", fd)) == b"raw"


def test_put_str_none_writes_nothing():
    assert _capture(lambda fd: put_str_fd(None, fd)) == b""


def test_put_endl():
    assert _capture(lambda fd: put_endl_fd("hello", fd)) == b"hello\n"


def test_put_endl_none_writes_nothing():
    assert _capture(lambda fd: put_endl_fd(None, fd)) == b""


def test_put_nbr_int_min():
    assert _capture(lambda fd: put_nbr_fd(-2147483648, fd)) == b"-2147483648"


def test_put_nbr_zero():
    assert _capture(lambda fd: put_nbr_fd(0, fd)) == b"0"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    assert int(_capture(lambda fd: put_nbr_fd(n, fd))) == n


@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126)))
def test_put_str_round_trip(text):
    assert _capture(lambda fd: put_str_fd(text, fd)).decode("ascii") == text


def test_writes_append_in_order():
    written = _capture(
        lambda fd: (
            put_str_fd("n=", fd),
            put_nbr_fd(-7, fd),
            put_char_fd(";", fd),
            put_endl_fd("", fd),
        )
    )
    assert written == b"n=-7;\n"


def test_bad_descriptor_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        put_str_fd("data", write_fd)