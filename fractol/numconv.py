"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))