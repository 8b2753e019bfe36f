"""String helpers with C-library semantics: searching, bounded copies,
comparison, trimming and splitting.

Positions are returned as indices into the string, and None stands for
"not found".
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Turn a one-character string or an integer code into a character.

    Integer codes are reduced to a single byte, as a C ``char`` cast does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c % 256)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_size(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    delimiter = _char(sep)
    if delimiter == "\0":
        return [s] if s else []
    return [piece for piece in s.split(delimiter) if piece]


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``, the position of the
    terminator. Returns None when the character does not occur.
    """
    _require_str(s, "s")
    target = _char(c)
    if target == "\0":
        is_nul = c == 0 if isinstance(c, int) else True
        return len(s) if is_nul else None
    index = s.find(target)
    return None if index < 0 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``. Returns None when the
    character does not occur.
    """
    _require_str(s, "s")
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def lcpy(src: str, size: int) -> tuple[str, int]:
    """Bounded copy into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving room
    for the terminator) together with the full length of ``src``. With a size
    of 0 nothing is copied.
    """
    _require_str(src, "src")
    _require_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def lcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Bounded append of ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had with
    unlimited room. When ``size`` cannot even hold ``dst`` and a terminator,
    ``dst`` is returned unchanged with ``len(src) + size``.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_size(size, "size")
    if size < len(dst) + 1:
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on every element of ``chars`` in place.

    A non-None return value replaces the element.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference between the codes of the first pair that differ,
    or 0. The end of a string compares as code 0.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _require_size(n, "n")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None otherwise.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _require_size(n, "n")
    if not little:
        return 0
    index = big.find(little, 0, min(n, len(big)))
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    _require_size(start, "start")
    _require_size(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]