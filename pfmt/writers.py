"""Low-level writers for characters, strings and numbers to a text stream.

Every writer returns the number of characters it wrote. When no stream is
given, standard output is used.
"""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO, Union

NULL_STR_SYMBOL = "(null)"
NULL_PTR_SYMBOL = "(nil)"
FORMAT_CHAR = "%"
HEX_LOWER_CHARSET = "0123456789abcdef"
HEX_UPPER_CHARSET = "0123456789ABCDEF"
PERCENT_SYMBOL = "%"
NEGATIVE_SYMBOL = "-"
POINTER_PREFIX = "0x"
FLOATING_POINT_SYMBOL = "."
INT_MIN_VALUE = -2147483648
INT_MIN_TEXT = "-2147483648"
DOUBLE_PRECISION = 20

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _emit(text: str, stream: Optional[TextIO]) -> int:
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def _hex_text(num: int, charset: str) -> str:
    if len(charset) != 16:
        raise ValueError("a hexadecimal charset needs exactly 16 characters")
    if num == 0:
        return charset[0]
    digits = []
    while num:
        num, rem = divmod(num, 16)
        digits.append(charset[rem])
    return "".join(reversed(digits))


def write_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(operator.index(c) & 0xFF)
    return _emit(ch, stream)


def write_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; ``None`` is written as ``(null)``."""
    return _emit(NULL_STR_SYMBOL if s is None else s, stream)


def write_ptr(address: int, stream: Optional[TextIO] = None) -> int:
    """Write an address as lower-case hexadecimal, without a prefix.

    The address is taken as an unsigned 64-bit value.
    """
    value = operator.index(address) & _POINTER_MASK
    return _emit(_hex_text(value, HEX_LOWER_CHARSET), stream)


def write_hex(
    num: int,
    charset: str = HEX_LOWER_CHARSET,
    stream: Optional[TextIO] = None,
) -> int:
    """Write ``num`` as an unsigned 32-bit value in hexadecimal.

    ``charset`` gives the sixteen digit characters.
    """
    value = operator.index(num) & _UINT_MASK
    return _emit(_hex_text(value, charset), stream)


def write_nbr(num: int, stream: Optional[TextIO] = None) -> int:
    """Write the signed decimal text of ``num``."""
    value = operator.index(num)
    if value == INT_MIN_VALUE:
        return _emit(INT_MIN_TEXT, stream)
    text = str(abs(value))
    if value < 0:
        text = NEGATIVE_SYMBOL + text
    return _emit(text, stream)


def write_percent(stream: Optional[TextIO] = None) -> int:
    """Write a literal percent sign."""
    return _emit(PERCENT_SYMBOL, stream)