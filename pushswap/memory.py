"""Byte-buffer primitives: filling, copying, moving, searching and comparing.

Buffers are ``bytearray`` objects (or anything supporting slice assignment);
read-only inputs may be any bytes-like object. Byte values are reduced to
the range 0-255 the way an unsigned char would be.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in sizes:
        if length > size:
            raise ValueError(f"length {length} exceeds buffer size {size}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to *value* and return it."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first *length* bytes of *buffer* and return it."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memcpy(dest: bytearray, source: BytesLike, length: int) -> bytearray:
    """Copy the first *length* bytes of *source* into *dest* and return it."""
    _check_length(length, len(dest), len(source))
    dest[:length] = bytes(source[:length])
    return dest


def memmove(buffer: bytearray, dest: int, source: int, length: int) -> bytearray:
    """Move *length* bytes within *buffer* from offset *source* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns *buffer*.
    """
    if dest < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, len(buffer) - source)
    buffer[dest : dest + length] = bytes(buffer[source : source + length])
    return buffer


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Offset of the first byte equal to *value* in the first *length* bytes, or None."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Difference of the first unequal bytes within *length*, or 0 if all match."""
    _check_length(length, len(first), len(second))
    for x, y in zip(bytes(first[:length]), bytes(second[:length])):
        if x != y:
            return x - y
    return 0