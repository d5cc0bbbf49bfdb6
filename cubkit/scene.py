"""Locating texture and colour elements and the map inside a scene file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

from cubkit.cubfile import CubError, validate_after_map

ELEMENT_KEYS = ("F", "C", "SO", "WE", "EA", "NO")

_KIND = {
    "F": "color",
    "C": "color",
    "SO": "texture",
    "WE": "texture",
    "EA": "texture",
    "NO": "texture",
}

# Lines longer than this are read in several pieces, each checked alone.
_READ_CHUNK = 255


@dataclass
class SceneElements:
    """The texture and colour elements seen so far, keyed by identifier."""

    values: dict[str, str] = field(default_factory=dict)

    def register(self, line: str) -> Optional[str]:
        """Record ``line`` if it declares an element and return its key.

        Lines that declare no element give None. A second declaration of
        the same element raises :class:`CubError`.
        """
        for key in ELEMENT_KEYS:
            if line.startswith(key + " "):
                if key in self.values:
                    raise CubError(f"Error: Duplicate {key} {_KIND[key]}")
                self.values[key] = line[len(key) + 1:]
                return key
        return None

    def all_loaded(self) -> bool:
        """Return True once every texture and colour has been declared."""
        return all(key in self.values for key in ELEMENT_KEYS)


def _chunks(line: str) -> Iterator[str]:
    for start in range(0, len(line), _READ_CHUNK):
        yield line[start:start + _READ_CHUNK]


def _element_text(chunk: str) -> str:
    text = chunk.lstrip(" \t")
    if text.endswith("\n"):
        text = text[:-1]
    return text


def scan_elements(path: Union[str, os.PathLike]) -> SceneElements:
    """Read a scene file and collect its element declarations."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise CubError("Error: Cannot open file") from exc
    elements = SceneElements()
    with handle:
        for raw in handle:
            text = raw.decode("utf-8", errors="surrogateescape")
            for chunk in _chunks(text):
                elements.register(_element_text(chunk))
    return elements


def find_map_start(elements: SceneElements, lines: Sequence[str]) -> int:
    """Return the index of the first line starting with a space or tab.

    That line is where the map begins; every element must be declared by then.
    """
    for index, line in enumerate(lines):
        if not line:
            continue
        if line[0] in " \t":
            if elements.all_loaded():
                return index
            raise CubError(
                f"Error: Invalid data before map (line {index}: {line!r})"
            )
    raise CubError("Error: No map found")


def parse_texture_colors(
    lines: Sequence[str], path: Union[str, os.PathLike]
) -> int:
    """Check the elements of ``path`` and the map in ``lines``.

    Returns the index of the first map line.
    """
    elements = scan_elements(path)
    map_start = find_map_start(elements, lines)
    validate_after_map(lines, map_start)
    return map_start