"""Searching and comparing text with terminator-aware semantics.

A text ends at its first NUL character, if any; everything after it is ignored.
A searched-for character may be given as a one-character string or an
integer code (reduced to a byte value).
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

Char = Union[str, int]

NUL = "\0"


def _effective(text: Optional[str]) -> str:
    if text is None:
        return ""
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def _char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def c_length(text: Optional[str]) -> int:
    """Length of *text* up to its first NUL; None counts as empty."""
    return len(_effective(text))


def find_char(text: str, c: Char) -> Optional[int]:
    """Index of the first *c* in *text*, or None.

    Searching for NUL yields the position of the terminator, i.e. the length.
    """
    body = _effective(text)
    ch = _char(c)
    if ch == NUL:
        return len(body)
    index = body.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: Char) -> Optional[int]:
    """Index of the last *c* in *text*, or None.

    Searching for NUL yields the position of the terminator, i.e. the length.
    """
    body = _effective(text)
    ch = _char(c)
    if ch == NUL:
        return len(body)
    index = body.rfind(ch)
    return None if index < 0 else index


def contains_char(text: str, c: Char) -> bool:
    """True when *c* occurs in *text*; NUL is always considered present."""
    ch = _char(c)
    return ch == NUL or ch in _effective(text)


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within the first *length*
    characters of *haystack*, or None. An empty needle is found at 0."""
    target = _effective(needle)
    if not target:
        return 0
    if length <= 0:
        return None
    index = _effective(haystack)[:length].find(target)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the code difference at the first mismatch (a shorter text
    compares as if padded with NUL), or 0 when the prefixes are equal.
    """
    if n <= 0:
        return 0
    pairs = zip_longest(_effective(first)[:n], _effective(second)[:n], fillvalue=NUL)
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def differs(first: str, second: str) -> bool:
    """True when the two texts are not identical up to their terminators."""
    return _effective(first) != _effective(second)