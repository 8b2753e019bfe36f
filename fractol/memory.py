"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying.

Buffers are ``bytearray`` objects (or any bytes-like object for read-only
operations). Byte values are reduced to a single byte, as a C
``unsigned char`` cast does. A length that reaches past the end of a buffer
raises ``IndexError``; a negative length raises ``ValueError``.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _count(n: int, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def _within(buf: BytesLike, start: int, n: int, what: str) -> None:
    if start + n > len(buf):
        raise IndexError(
            f"{what}: {n} bytes from offset {start} exceed a buffer of {len(buf)} bytes"
        )


def zero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    mem_set(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the total size does not fit in a size_t.
    """
    _count(nmemb, "nmemb")
    _count(size, "size")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the maximum object size")
    return bytearray(total)


def mem_chr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes, or None."""
    _count(n)
    _within(buf, 0, n, "mem_chr")
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def mem_cmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ,
    or 0 when they are all equal.
    """
    _count(n)
    _within(a, 0, n, "mem_cmp")
    _within(b, 0, n, "mem_cmp")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def mem_set(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _count(n)
    _within(buf, 0, n, "mem_set")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def mem_copy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _count(n)
    _within(src, 0, n, "mem_copy source")
    _within(dest, 0, n, "mem_copy destination")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buf``.
    """
    _count(n)
    _count(dest, "dest")
    _count(src, "src")
    _within(buf, src, n, "mem_move source")
    _within(buf, dest, n, "mem_move destination")
    if dest != src:
        buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf