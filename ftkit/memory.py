"""Byte-buffer operations on mutable buffers such as bytearray and memoryview."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf, c: int, n: int):
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises MemoryError when the total size would overflow SIZE_MAX.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise MemoryError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(nmemb * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check_count(n, buf)
    target = c & 0xFF
    return next((i for i, b in enumerate(bytes(buf[:n])) if b == target), None)


def memcmp(s1, s2, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, n: int):
    """Copy n bytes from src into dest; return dest."""
    _check_count(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src into dest, correct even when they overlap; return dest."""
    _check_count(n, dest, src)
    # Taking a snapshot first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest