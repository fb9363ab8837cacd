"""Byte-buffer helpers working in place on mutable buffers."""

from __future__ import annotations

import sys
from typing import Optional

__all__ = ["bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]


def _require(buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if n > len(buffer):
        raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def bzero(buffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise OverflowError("allocation size overflows")
    return bytearray(total)


def memchr(buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _require(buffer, n)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _require(first, n)
    _require(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memmove(dest, src, n: int):
    """Copy n bytes from src into dest, safe when the two overlap; return dest."""
    if dest is None and src is None:
        return None
    _require(src, n)
    _require(dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest, src, n: int):
    """Copy n bytes from src into dest; return dest."""
    return memmove(dest, src, n)


def memset(buffer, value: int, n: int):
    """Fill the first n bytes of buffer with value; return buffer."""
    _require(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer