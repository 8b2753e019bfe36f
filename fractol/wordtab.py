"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re
from typing import Optional

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, pattern: str, limit: int) -> Optional[int]:
    """Index of the first ``pattern`` in ``text``.

    A pattern longer than ``limit`` is never found. An empty pattern is
    found at index 0. Returns None when there is no match.
    """
    if len(pattern) > limit:
        return None
    index = text.find(pattern)
    return None if index < 0 else index


def find_unquoted(text: str, pattern: str, limit: int) -> Optional[int]:
    """Index of the first ``pattern`` in ``text`` that lies outside double quotes.

    A pattern longer than ``limit`` is never found. An empty pattern is
    found at index 0. Returns None when there is no match.
    """
    if len(pattern) > limit:
        return None
    if not pattern:
        return 0
    quoted = False
    for pos in range(len(text) - len(pattern) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return None


def words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty pieces."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]