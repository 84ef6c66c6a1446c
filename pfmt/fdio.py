"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _as_bytes(s: Union[str, bytes]) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    An integer is taken as a byte value and truncated to 8 bits.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: Optional[Union[str, bytes]], fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _as_bytes(s))


def put_endl_fd(s: Optional[Union[str, bytes]], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _as_bytes(s) + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the integer ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode("ascii"))