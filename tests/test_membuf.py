import pytest
from hypothesis import given
from hypothesis import strategies as st

from pfmt.membuf import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"x" * 3
    assert buf[3:] == b"def"


def test_memset_takes_value_modulo_256():
    buf = bytearray(b"zzzz")
    memset(buf, 256 + ord("A"), 2)
    assert buf == b"AAzz"


def test_memset_rejects_count_past_end():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_memset_rejects_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"hello")
    assert bzero(buf, 4) is None
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o"


def test_memcpy_copies_prefix():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == bytes(2)


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert bytes(result) == b"abcd"
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buf == b"cdefef"


@given(st.binary(max_size=32))
def test_memmove_round_trip(data):
    dest = bytearray(len(data))
    memmove(dest, data, len(data))
    assert dest == data


def test_memchr_finds_first():
    assert memchr(b"abcabc", ord("c"), 6) == 2


def test_memchr_respects_limit():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_value_modulo_256():
    assert memchr(b"xAy", 256 + ord("A"), 3) == 1


def test_memchr_finds_nul_byte():
    assert memchr(b"ab\0cd", 0, 5) == 2


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_difference_of_bytes():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"b", b"a", 1) > 0


def test_memcmp_stops_at_limit():
    assert memcmp(b"abX", b"abY", 2) == 0


@given(st.binary(min_size=1, max_size=16), st.binary(min_size=1, max_size=16))
def test_memcmp_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert memcmp(a, b, n) == -memcmp(b, a, n)


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert buf == bytes(12)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_strlcpy_full_copy():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", 10) == 5
    assert dst[:6] == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(b"ZZZZZZ")
    assert strlcpy(dst, b"hello", 3) == 5
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"ZZZ"


def test_strlcpy_size_zero_writes_nothing():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"hello", 0) == 5
    assert dst == b"keep"


def test_strlcpy_source_ends_at_nul():
    dst = bytearray(8)
    assert strlcpy(dst, b"ab\0cd", 8) == 2
    assert dst[:3] == b"ab\0"


@given(st.binary(max_size=20).filter(lambda b: 0 not in b), st.integers(1, 24))
def test_strlcpy_invariant(src, size):
    dst = bytearray(size)
    assert strlcpy(dst, src, size) == len(src)
    copied = src[: size - 1]
    assert dst[: len(copied) + 1] == copied + b"\0"


def test_strlcat_appends():
    dst = bytearray(b"ab\0" + bytes(5))
    assert strlcat(dst, b"cde", 8) == 5
    assert dst[:6] == b"abcde\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0" + bytes(5))
    assert strlcat(dst, b"cde", 4) == 5
    assert dst[:4] == b"abc\0"


def test_strlcat_without_nul_in_size():
    dst = bytearray(b"abcdef")
    assert strlcat(dst, b"xyz", 3) == 3 + 3
    assert dst == b"abcdef"


@given(
    st.binary(max_size=10).filter(lambda b: 0 not in b),
    st.binary(max_size=10).filter(lambda b: 0 not in b),
)
def test_strlcat_with_room_concatenates(head, tail):
    size = len(head) + len(tail) + 1
    dst = bytearray(head + b"\0" + bytes(len(tail)))
    assert strlcat(dst, tail, size) == len(head) + len(tail)
    assert dst == head + tail + b"\0"