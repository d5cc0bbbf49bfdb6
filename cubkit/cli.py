"""Command that checks a ``.cub`` scene file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubkit.cubfile import CubError, check_arguments, read_lines
from cubkit.scene import parse_texture_colors


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the scene file named on the command line; return an exit status."""
    args = list(sys.argv if argv is None else argv)
    if len(args) != 2:
        program = args[0] if args else "cub3D"
        print(f"Usage: {program} <cub_file>")
        return 1
    try:
        path = check_arguments(args)
    except CubError as exc:
        print(exc)
        return 1
    try:
        lines = read_lines(path)
    except CubError:
        print("Failed to read the file")
        return 1
    try:
        parse_texture_colors(lines, path)
    except CubError as exc:
        print(exc)
        print("Parsing failed")
        return 1
    print("Parsing completed successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())