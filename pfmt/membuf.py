"""Byte-buffer filling, copying, searching and bounded C-string copies."""

from __future__ import annotations

import operator
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> int:
    """Validate a byte count against the buffers it applies to."""
    n = operator.index(n)
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")
    return n


def _c_string(src: Buffer) -> bytes:
    """The bytes of ``src`` up to, not including, its first NUL byte."""
    return bytes(src).split(b"\0", 1)[0]


def memset(buf: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256).

    Returns ``buf``.
    """
    n = _check_count(n, buf)
    buf[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first ``n`` bytes of ``src`` into ``dest``; returns ``dest``."""
    n = _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap.

    Returns ``dest``.
    """
    n = _check_count(n, dest, src)
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in ``buf[:n]``.

    ``None`` if there is none.
    """
    n = _check_count(n, buf)
    index = bytes(buf[:n]).find(operator.index(value) & 0xFF)
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    n = _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dst: MutableBuffer, src: Buffer, size: int) -> int:
    """Copy the C string ``src`` into ``dst`` of capacity ``size``.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated
    unless ``size`` is 0. Returns the length of ``src``, so a value not
    below ``size`` means the copy was truncated.
    """
    size = _check_count(size, dst)
    text = _c_string(src)
    if size == 0:
        return len(text)
    count = min(len(text), size - 1)
    dst[:count] = text[:count]
    dst[count] = 0
    return len(text)


def strlcat(dst: MutableBuffer, src: Buffer, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dst``.

    ``size`` is the full capacity of ``dst``; the result stays
    NUL-terminated within it. Returns the length the combined string would
    have had, so a value not below ``size`` means truncation. If ``dst``
    holds no NUL within ``size`` bytes nothing is written and the result is
    ``size`` plus the length of ``src``.
    """
    size = _check_count(size, dst)
    text = _c_string(src)
    dlen = bytes(dst[:size]).find(0)
    if dlen < 0:
        return size + len(text)
    count = min(len(text), size - dlen - 1)
    dst[dlen:dlen + count] = text[:count]
    dst[dlen + count] = 0
    return dlen + len(text)