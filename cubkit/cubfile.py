"""Reading and checking ``.cub`` scene files."""

from __future__ import annotations

import os
import re
from typing import Sequence, Union

CUB_EXTENSION = ".cub"
MAP_CHARACTERS = frozenset("10NSWE \t\n")
MAP_LINE_STARTS = "NSWE01"

_TRIM_CHARS = " \t\n"
_SPACE_CHARS = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d*)")


class CubError(ValueError):
    """Raised when a scene file or its arguments are not valid."""


def has_cub_extension(filename: str) -> bool:
    """Return True when ``filename`` ends in ``.cub`` and has a stem."""
    return len(filename) > len(CUB_EXTENSION) and filename.endswith(CUB_EXTENSION)


def check_arguments(argv: Sequence[str]) -> str:
    """Check command-line arguments and return the scene file path."""
    if len(argv) != 2:
        raise CubError(
            "Error: Wrong number of arguments.\nUsage: ./cub3d map.cub"
        )
    path = argv[1]
    if not has_cub_extension(path):
        raise CubError("Error: The map file must have a .cub extension.")
    return path


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a 0xRRGGBB integer.

    Empty components between commas are ignored; exactly three must remain,
    each between 0 and 255.
    """
    components = [part for part in text.split(",") if part]
    if len(components) != 3:
        raise CubError(
            f"Error: colour needs three components, got {len(components)}: {text!r}"
        )
    red, green, blue = (_atoi(part) for part in components)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise CubError(f"Error: colour component out of range 0-255: {text!r}")
    return (red << 16) | (green << 8) | blue


def is_whitespace(text: str) -> bool:
    """Return True when ``text`` holds only spaces and tabs (or nothing)."""
    return all(char in " \t" for char in text)


def is_blank(text: str) -> bool:
    """Return True when ``text`` holds only whitespace of any kind."""
    return all(char in _SPACE_CHARS for char in text)


def trim(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def contains_invalid_characters(line: str) -> bool:
    """Return True when ``line`` holds a character not allowed in a map."""
    return any(char not in MAP_CHARACTERS for char in line)


def find_map_end(lines: Sequence[str]) -> int:
    """Return the index of the first line of only spaces and tabs.

    When there is none, the number of lines is returned.
    """
    return next(
        (index for index, line in enumerate(lines) if is_whitespace(line)),
        len(lines),
    )


def validate_after_map(lines: Sequence[str], map_start: int) -> None:
    """Check every line from ``map_start`` on for empty lines and bad characters."""
    for index in range(map_start, len(lines)):
        line = lines[index]
        if line.startswith("\n"):
            raise CubError(f"Error: Contains space on line {index}: {line!r}")
        if contains_invalid_characters(line):
            raise CubError(f"Error: Invalid characters on line {index}: {line!r}")


def read_lines(path: Union[str, os.PathLike]) -> list[str]:
    """Read a file into lines, each keeping its trailing newline."""
    try:
        with open(path, "rb") as handle:
            return [
                raw.decode("utf-8", errors="surrogateescape") for raw in handle
            ]
    except OSError as exc:
        raise CubError(f"Error opening file: {exc.strerror or exc}") from exc


def extract_map(lines: Sequence[str]) -> list[str]:
    """Return the lines that start with a map character (or are empty)."""
    return [line for line in lines if line[:1] in MAP_LINE_STARTS]