"""Building new text from existing text: slicing, joining, trimming, splitting.

Every input text ends at its first NUL character, if any.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, Union

from pushswap.textsearch import c_length

Char = Union[str, int]

NUL = "\0"


def _body(text: str) -> str:
    return text[: c_length(text)]


def _single(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def substring(text: str, start: int, length: int) -> str:
    """At most *length* characters of *text* from *start*; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    body = _body(text)
    if start >= len(body):
        return ""
    return body[start : start + length]


def join(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two texts; None when both are missing."""
    if first is None and second is None:
        return None
    return _body(first or "") + _body(second or "")


def trim(text: Optional[str], charset: str) -> Optional[str]:
    """Remove characters of *charset* from both ends of *text*."""
    if text is None:
        return None
    chars = _body(charset)
    if not chars:
        return _body(text)
    return _body(text).strip(chars)


def split_words(text: Optional[str], separator: Char) -> Optional[List[str]]:
    """Split *text* on *separator*, dropping empty pieces."""
    if text is None:
        return None
    body = _body(text)
    sep = _single(separator)
    if sep == NUL:
        return [body] if body else []
    return [word for word in body.split(sep) if word]


def duplicate(text: str) -> str:
    """A copy of *text* up to its terminator."""
    return _body(text)


def map_indexed(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new text from ``func(index, char)`` for every character.

    A NUL returned by *func* ends the result there.
    """
    if text is None or func is None:
        return None
    pieces = []
    for index, ch in enumerate(_body(text)):
        produced = _single(func(index, ch))
        pieces.append(produced)
    return _body("".join(pieces))


def each_indexed(
    text: Union[str, Sequence[str]], func: Callable[[int, str], Optional[str]]
) -> str:
    """Call ``func(index, char)`` on every character, in order.

    When *func* returns a character it replaces the one it was given;
    returning None leaves it as it was. The resulting text is returned.
    """
    body = _body(text if isinstance(text, str) else "".join(text))
    result = []
    for index, ch in enumerate(body):
        replacement = func(index, ch)
        result.append(ch if replacement is None else _single(replacement))
    return _body("".join(result))


def bounded_copy(source: str, size: int) -> Tuple[str, int]:
    """Copy *source* into a buffer of *size* slots (one kept for the terminator).

    Returns the copied text and the full length of *source*; a size of 0
    copies nothing.
    """
    _non_negative("size", size)
    body = _body(source)
    copied = body[: size - 1] if size > 0 else ""
    return copied, len(body)


def bounded_concat(dest: str, source: str, size: int) -> Tuple[str, int]:
    """Append *source* to *dest* within a buffer of *size* slots.

    Returns the new text and the length the full result would have had.
    When *size* is 0 or smaller than *dest*, *dest* is left as it was and
    the length of *source* plus *size* is returned.
    """
    _non_negative("size", size)
    head = _body(dest)
    tail = _body(source)
    if size == 0 or size < len(head):
        return head, len(tail) + size
    room = max(size - 1 - len(head), 0)
    return head + tail[:room], len(head) + len(tail)