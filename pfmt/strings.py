"""Searching, comparing, slicing and transforming text strings."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import chain, islice
from typing import Optional, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None`` if it does not occur.

    Searching for the NUL character finds the end of the string, so the
    result is then ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None`` if it does not occur.

    Searching for the NUL character gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    The result is negative, zero or positive as ``s1`` sorts before, equal
    to or after ``s2``; it is the difference of the first differing code
    points. The end of a string compares as a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip(chain(s1, _NUL), chain(s2, _NUL))
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at index 0. ``None`` means no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start`` on.

    A ``start`` past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Words of ``s`` separated by runs of the character ``sep``.

    Empty words are dropped, so leading, trailing and repeated separators
    produce nothing.
    """
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace every item of ``s`` in place by ``func(index, item)``."""
    for index, item in enumerate(s):
        s[index] = func(index, item)