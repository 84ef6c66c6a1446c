# pfmt

A compact printf-style formatter together with a set of character, string,
byte-buffer and file-descriptor helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`pfmt.printf.printf(fmt, *args, stream=None)` writes to a text stream
(standard output when `stream` is `None`) and returns the number of
characters written. `pfmt.printf.sprintf(fmt, *args)` returns the formatted
text instead.

```python
from pfmt.printf import printf, sprintf

printf("%s has %d items (%x hex)\n", "cart", 42, 42)
text = sprintf("%c%c %u%%", "o", "k", 100)   # "ok 100%"
```

Supported conversions:

| Spec | Output                                                                      |
|------|-----------------------------------------------------------------------------|
| `%c` | one character; a `str` of length 1, or an integer taken as a byte value     |
| `%s` | a string; `None` is written as `(null)`                                     |
| `%p` | `0x` and lower-case hex; `None` or `0` is `(nil)`; a non-integer uses its `id()` |
| `%d` | a signed decimal integer, wrapped to 32 bits                                |
| `%i` | the same as `%d`                                                            |
| `%u` | an unsigned decimal integer, wrapped to 32 bits                             |
| `%x` | lower-case hexadecimal of the value as an unsigned 32-bit integer           |
| `%X` | upper-case hexadecimal of the value as an unsigned 32-bit integer           |
| `%%` | a literal percent sign                                                      |

Errors:

- a `%` not followed by one of the characters above (including a `%` at the
  very end of the format) raises `ValueError`;
- too few arguments raise `TypeError`;
- surplus arguments are ignored.

`pfmt.conversions.find_conversion(text)` returns the `Conversion` whose
specification `text` starts with, or `None`. `Conversion.render(args, stream)`
takes the next value from the iterator `args` (when the conversion needs one),
writes it, and returns the number of characters written. The tables of
conversions are `pfmt.conversions.CONVERSIONS` and
`pfmt.conversions.SPECIAL_CONVERSIONS`.

## Lower-level writers

`pfmt.writers` holds the functions the conversions are built on. Each writes
to a stream (standard output by default) and returns the number of characters
written:

- `write_char(c, stream=None)`
- `write_str(s, stream=None)` – `None` becomes `(null)`
- `write_ptr(address, stream=None)` – lower-case hex of an unsigned 64-bit value, no prefix
- `write_hex(num, charset=HEX_LOWER_CHARSET, stream=None)` – hex of an unsigned 32-bit value
- `write_nbr(num, stream=None)` – signed decimal
- `write_percent(stream=None)`

## Helpers

- `pfmt.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` (ASCII only; accept a one-character
  string or an integer code), `atoi` (C-style parse, wrapped to a signed
  32-bit integer) and `itoa`.
- `pfmt.strings`: `strchr`, `strrchr`, `strnstr` (return an index or
  `None`), `strncmp`, `substr`, `strjoin`, `strtrim`, `split` (drops empty
  words), `strmapi` and `striteri` (in place on a mutable sequence).
- `pfmt.membuf`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`, `strlcpy`, `strlcat` over `bytearray` or `memoryview` buffers.
  Byte counts larger than a buffer raise `ValueError`.
- `pfmt.fdio`: `put_char_fd`, `put_str_fd`, `put_endl_fd`, `put_nbr_fd`,
  which write straight to an open file descriptor with `os.write`.

```python
from pfmt.strings import split, strtrim
from pfmt.charclass import atoi

split("  a  b c ", " ")        # ["a", "b", "c"]
strtrim("xxhixx", "x")         # "hi"
atoi("  -42abc")               # -42
```

## What it does not do

There are no flags, field widths, precisions or length modifiers, and no
floating-point conversions. The package is a library only; it installs no
command.