"""Checking the map grid: its characters, its player and its walls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cubkit.cubfile import CubError

PLAYER_DIRECTIONS = frozenset("NSEW")
MAP_TILES = frozenset("01")
WALL = "1"


class MapError(CubError):
    """Raised when a map grid is not valid."""


@dataclass(frozen=True)
class Player:
    """The player's starting cell and the direction it faces."""

    x: int
    y: int
    direction: str


@dataclass(frozen=True)
class GameMap:
    """A checked map grid together with the player found in it."""

    rows: tuple[str, ...]
    player: Player

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max(len(row) for row in self.rows)


def _rows(grid: Sequence[str]) -> list[str]:
    return [row.rstrip("\n") for row in grid]


def check_map_elements(grid: Sequence[str]) -> Player:
    """Check every cell and return the single player start."""
    players: list[Player] = []
    for y, row in enumerate(_rows(grid)):
        for x, cell in enumerate(row):
            if cell in PLAYER_DIRECTIONS:
                players.append(Player(x, y, cell))
            elif cell not in MAP_TILES:
                raise MapError(f"Error : Invalid character {cell!r} in map.")
    if len(players) != 1:
        raise MapError(
            "Error : Map must contain exactly one starting position "
            f"(N, S, E, or W), found {len(players)}."
        )
    return players[0]


def check_map_walls(grid: Sequence[str]) -> None:
    """Check that the outer rows and columns of the grid are walls."""
    rows = _rows(grid)
    if not rows or not any(rows):
        raise MapError("Error: Map must be surrounded by walls.")
    width = max(len(row) for row in rows)
    for edge in (rows[0], rows[-1]):
        if edge.ljust(width) != WALL * width:
            raise MapError("Error: Map must be surrounded by walls.")
    for y, row in enumerate(rows):
        if row[:1] != WALL or row.ljust(width)[width - 1] != WALL:
            raise MapError(f"Error: Map must be surrounded by walls (row {y}).")


def check_map(grid: Sequence[str]) -> GameMap:
    """Run every map check and return the checked map."""
    try:
        player = check_map_elements(grid)
    except MapError as exc:
        raise MapError("Error : Map doesn't have valid char !!!") from exc
    try:
        check_map_walls(grid)
    except MapError as exc:
        raise MapError("Error : Map doesn't have walls !!!") from exc
    return GameMap(tuple(_rows(grid)), player)