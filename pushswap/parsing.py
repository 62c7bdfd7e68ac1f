"""Turning command-line arguments into the starting stack."""

from __future__ import annotations

from typing import Iterable

from pushswap.numeric import INT_MAX, INT_MIN
from pushswap.queries import position_of
from pushswap.stack import PushSwapError, Stack
from pushswap.textbuild import split_words

_WHITESPACE = frozenset(" \t\n\v\f\r")


def parse_integer(text: str) -> int:
    """A whole decimal number: optional leading whitespace and sign, then digits.

    Anything else, including nothing after the sign, is an error.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    if pos == len(text):
        raise PushSwapError(f"not an integer: {text!r}")
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    if pos != len(text):
        raise PushSwapError(f"not an integer: {text!r}")
    return -result if negative else result


def parse_arguments(args: Iterable[str]) -> Stack:
    """Build stack a from arguments, each holding space-separated integers.

    Empty arguments, non-integers, values outside the 32-bit range and
    repeated values are errors.
    """
    stack = Stack()
    for arg in args:
        words = split_words(arg, " ")
        if not words:
            raise PushSwapError("empty argument")
        for word in words:
            number = parse_integer(word)
            if not INT_MIN <= number <= INT_MAX:
                raise PushSwapError(f"number out of range: {word}")
            if position_of(number, stack) is not None:
                raise PushSwapError(f"duplicate number: {word}")
            stack.push_bottom(number)
    return stack