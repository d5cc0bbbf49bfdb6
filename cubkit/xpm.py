"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional, Union

from cubkit.colors import lookup_color
from cubkit.image import Image
from cubkit.text import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when pixmap data cannot be read."""


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces."""
    while (start := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[start + 2:], "*/", len(text) - start - 2)
        text = _blank(text, start, end + 4)
    while (start := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[start + 2:], "\n", len(text) - start - 2)
        text = _blank(text, start, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"pixmap data ends before {what}") from None


def _color_value(words: list[str]) -> int:
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if index >= len(words):
        raise XpmError("colour definition has no colour after 'c'")
    suffix: Optional[str] = words[index + 1] if index + 1 < len(words) else None
    return lookup_color(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source, "the header"))
    if len(words) < 4:
        raise XpmError("pixmap header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid pixmap header: {' '.join(words[:4])!r}")

    # Short keys overwrite earlier definitions; longer keys keep the first.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "a colour definition")
        key = line[:cpp]
        value = _color_value(split_words(line[cpp:]))
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "a pixel row")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def image_from_data(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings already split into lines."""
    return parse_xpm(lines)


def image_from_file(path: Union[str, os.PathLike]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))