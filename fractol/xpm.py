"""Reading XPM images into 32-bit pixel values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .colornames import color_by_name
from .numconv import atoi
from .wordtab import find, find_unquoted, words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_HEX_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1


class XpmError(ValueError):
    """The XPM data is malformed or incomplete."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 32-bit 0xAARRGGBB value.

    Transparent pixels carry ``0xFF000000``.
    """

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _blank(text: str, start: int, length: int) -> str:
    stop = min(start + length, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside strings with spaces.

    The length of the text is kept, so positions stay the same.
    """
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        end = find(text[begin + 2 :], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4 if end is not None else 3)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        end = find(text[begin + 2 :], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3 if end is not None else 2)
    return text


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    if sign == "-":
        value = -value
    return _wrap_int32(max(_LONG_MIN, min(_LONG_MAX, value)))


def text_rgb(name: str, end: Optional[str] = None) -> int:
    """The colour named by an XPM colour spec.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined to ``end``
    with a space when given) is looked up among the X11 colour names;
    ``none`` gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _pixel_value(color: int) -> int:
    if color == -1:
        color = TRANSPARENT
    return color & 0xFFFFFFFF


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its string values, in order.

    The first string is the header (width, height, colour count, characters
    per pixel), then one string per colour, then one per pixel row.
    """
    source = iter(lines)

    def next_line() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = words(next_line())
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {len(header)}")
    width, height, ncolors, cpp = (atoi(value) for value in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {' '.join(header[:4])}")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        key = line[:cpp]
        tokens = words(line[cpp:])
        try:
            at = tokens.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if at >= len(tokens):
            raise XpmError(f"colour line without a colour value: {line!r}")
        color = text_rgb(tokens[at], tokens[at + 1] if at + 1 < len(tokens) else None)
        if direct or key not in palette:
            palette[key] = color

    rows = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[x * cpp : (x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an XPM image from the text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def read_xpm_file(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())