"""Writing characters, text and numbers to streams, and printf-style formatting.

The supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Any other character after ``%`` produces nothing
and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_TEXT = "(null)"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_MISSING = object()

Char = Union[str, int]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _signed32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >> 31 else n


def _as_char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _write(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def put_char(c: Char, stream: Optional[TextIO] = None) -> int:
    """Write one character; returns the number of characters written."""
    return _write(_as_char(c), stream)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *text*, or ``(null)`` for None; returns the number written."""
    return _write(NULL_TEXT if text is None else text, stream)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write *text* followed by a newline; returns the number written."""
    return _write(text + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write *n* in decimal as a 32-bit signed integer; returns the number written."""
    return _write(str(_signed32(n)), stream)


def format_hex(n: int, digits: str = HEX_LOWER) -> str:
    """Hexadecimal text of a non-negative integer using the 16 given *digits*."""
    if len(digits) != 16:
        raise ValueError(f"expected 16 digits, got {len(digits)}")
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    out = []
    while True:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """``0x`` followed by the lower-case hexadecimal address; None is 0."""
    value = 0 if address is None else address & _POINTER_MASK
    return "0x" + format_hex(value, HEX_LOWER)


def _convert(spec: str, pending: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    arg = next(pending, _MISSING)
    if arg is _MISSING:
        raise ValueError(f"not enough arguments for conversion %{spec}")
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        if arg is None:
            return NULL_TEXT
        if not isinstance(arg, str):
            raise TypeError(f"%s expects a string, got {type(arg).__name__}")
        return arg
    if spec == "p":
        return format_pointer(arg)
    if spec in "di":
        return str(_signed32(arg))
    if spec == "u":
        return str(arg & _UINT_MASK)
    return format_hex(arg & _UINT_MASK, HEX_LOWER if spec == "x" else HEX_UPPER)


def format_printf(template: str, *args: Any) -> str:
    """Expand the conversions of *template* with *args* and return the text."""
    pieces = []
    pending = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, pending))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of *template*; returns the number of characters written."""
    return _write(format_printf(template, *args), stream)