"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

INT_BITS = 32
LONG_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed two's-complement integer of *bits* width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = _wrap(result * 10 + (ord(text[pos]) - ord("0")), bits)
        pos += 1
    return _wrap(-result, bits) if negative else result


def parse_int(text: str) -> int:
    """Leading decimal number of *text* as a 32-bit integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and nothing parsable gives 0. Overflow wraps around.
    """
    return _parse(text, INT_BITS)


def parse_long(text: str) -> int:
    """Like :func:`parse_int` but with a 64-bit result."""
    return _parse(text, LONG_BITS)


def int_to_str(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)