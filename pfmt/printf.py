"""Formatted output with the ``%c %s %p %d %i %u %x %X %%`` conversions."""

from __future__ import annotations

import io
from typing import Any, Optional, TextIO

from pfmt.conversions import find_conversion
from pfmt.writers import FORMAT_CHAR, write_str


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``fmt`` with its conversions filled in from ``args``.

    Output goes to ``stream``, or to standard output when it is ``None``.
    Returns the number of characters written. Surplus arguments are
    ignored; too few raise ``TypeError`` and an unknown conversion raises
    ``ValueError``.
    """
    remaining = iter(args)
    length = 0
    pos = 0
    while pos < len(fmt):
        marker = fmt.find(FORMAT_CHAR, pos)
        end = len(fmt) if marker < 0 else marker
        if end > pos:
            length += write_str(fmt[pos:end], stream)
        if marker < 0:
            break
        conversion = find_conversion(fmt[marker:])
        if conversion is None:
            raise ValueError(
                f"unsupported conversion {fmt[marker:marker + 2]!r} "
                f"at index {marker}"
            )
        length += conversion.render(remaining, stream)
        pos = marker + len(conversion.spec)
    return length


def sprintf(fmt: str, *args: Any) -> str:
    """Return what ``printf`` would write for ``fmt`` and ``args``."""
    buffer = io.StringIO()
    printf(fmt, *args, stream=buffer)
    return buffer.getvalue()