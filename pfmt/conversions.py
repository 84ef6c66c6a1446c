"""Conversion specifications and the table that maps them to writers."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from pfmt.writers import (
    HEX_LOWER_CHARSET,
    HEX_UPPER_CHARSET,
    NULL_PTR_SYMBOL,
    POINTER_PREFIX,
    write_char,
    write_hex,
    write_nbr,
    write_percent,
    write_ptr,
    write_str,
)

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1


def _as_int32(value: Any) -> int:
    """Reduce an integer to a signed 32-bit value, wrapping on overflow."""
    half = 1 << (_INT_BITS - 1)
    return ((operator.index(value) + half) & _UINT_MASK) - half


def _as_uint32(value: Any) -> int:
    """Reduce an integer to an unsigned 32-bit value, wrapping on overflow."""
    return operator.index(value) & _UINT_MASK


def _render_char(value: Any, stream: Optional[TextIO]) -> int:
    return write_char(value, stream)


def _render_str(value: Any, stream: Optional[TextIO]) -> int:
    return write_str(value, stream)


def _render_ptr(value: Any, stream: Optional[TextIO]) -> int:
    if value is None:
        return write_str(NULL_PTR_SYMBOL, stream)
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return write_str(NULL_PTR_SYMBOL, stream)
    return write_str(POINTER_PREFIX, stream) + write_ptr(address, stream)


def _render_signed(value: Any, stream: Optional[TextIO]) -> int:
    return write_nbr(_as_int32(value), stream)


def _render_unsigned(value: Any, stream: Optional[TextIO]) -> int:
    return write_nbr(_as_uint32(value), stream)


def _render_lower_hex(value: Any, stream: Optional[TextIO]) -> int:
    return write_hex(value, HEX_LOWER_CHARSET, stream)


def _render_upper_hex(value: Any, stream: Optional[TextIO]) -> int:
    return write_hex(value, HEX_UPPER_CHARSET, stream)


def _render_percent(stream: Optional[TextIO]) -> int:
    return write_percent(stream)


@dataclass(frozen=True)
class Conversion:
    """One conversion specification, such as ``%d``, and how to write it."""

    spec: str
    writer: Callable[..., int] = field(repr=False, compare=False)
    takes_argument: bool = True

    def render(self, args: Iterator[Any], stream: Optional[TextIO] = None) -> int:
        """Write this conversion, drawing its argument from ``args``.

        ``args`` is an iterator; a conversion that needs an argument takes
        the next one from it. Returns the number of characters written.
        """
        if not self.takes_argument:
            return self.writer(stream)
        try:
            value = next(args)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion {self.spec!r}"
            ) from None
        return self.writer(value, stream)


CONVERSIONS: tuple[Conversion, ...] = (
    Conversion("%c", _render_char),
    Conversion("%s", _render_str),
    Conversion("%p", _render_ptr),
    Conversion("%d", _render_signed),
    Conversion("%i", _render_signed),
    Conversion("%u", _render_unsigned),
    Conversion("%x", _render_lower_hex),
    Conversion("%X", _render_upper_hex),
)

SPECIAL_CONVERSIONS: tuple[Conversion, ...] = (
    Conversion("%%", _render_percent, takes_argument=False),
)


def find_conversion(text: str) -> Optional[Conversion]:
    """The conversion whose specification starts ``text``, or ``None``."""
    for conversion in (*CONVERSIONS, *SPECIAL_CONVERSIONS):
        if text.startswith(conversion.spec):
            return conversion
    return None