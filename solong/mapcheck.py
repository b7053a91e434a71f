"""Validation of so_long map grids: shape, contents, walls and reachability."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

TILE_SIZE = 64


class Tile(str, Enum):
    """Characters that may appear in a map grid."""

    FLOOR = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"
    FLOOD = "F"


class MapError(ValueError):
    """Raised when a map grid breaks one of the map rules."""


NOT_RECTANGULAR = "Map not rectangular!"
INVALID_CHAR = "Map contains a forbidden symbol!"
BAD_PLAYER = "There must be exactly 1 player!"
BAD_EXIT = "There must be exactly 1 exit!"
NO_COLLECTIBLES = "No collectibles found."
MISSING_WALLS = "Missing walls around map"
WRONG_PATH = "Wrong map. Exit or collectible not reachable."

_COUNTED = {Tile.PLAYER.value, Tile.EXIT.value, Tile.COLLECTIBLE.value}
_PLAIN = {Tile.WALL.value, Tile.FLOOR.value}


@dataclass(frozen=True)
class MapInfo:
    """What validation learned about a well-formed map."""

    width: int
    height: int
    collectibles: int
    player: tuple[int, int]


def _check_walls(grid: Sequence[str], width: int, height: int) -> None:
    top, bottom = grid[0], grid[height - 1]
    if any(top[i] != Tile.WALL.value or bottom[i] != Tile.WALL.value
           for i in range(width)):
        raise MapError(MISSING_WALLS)
    if any(row[0] != Tile.WALL.value or row[width - 1] != Tile.WALL.value
           for row in grid):
        raise MapError(MISSING_WALLS)


def validate_format(grid: Sequence[str]) -> MapInfo:
    """Check shape, symbols, counts and surrounding walls of a grid."""
    if not grid:
        raise MapError("Map is empty!")
    width = len(grid[0])
    counts = {symbol: 0 for symbol in _COUNTED}
    player = (0, 0)
    for y, line in enumerate(grid):
        if len(line) != width:
            raise MapError(NOT_RECTANGULAR)
        for x, char in enumerate(line):
            if char == Tile.PLAYER.value:
                player = (x, y)
            if char in counts:
                counts[char] += 1
            elif char not in _PLAIN:
                raise MapError(INVALID_CHAR)
    if counts[Tile.PLAYER.value] != 1:
        raise MapError(BAD_PLAYER)
    if counts[Tile.EXIT.value] != 1:
        raise MapError(BAD_EXIT)
    if counts[Tile.COLLECTIBLE.value] < 1:
        raise MapError(NO_COLLECTIBLES)
    _check_walls(grid, width, len(grid))
    return MapInfo(
        width=width,
        height=len(grid),
        collectibles=counts[Tile.COLLECTIBLE.value],
        player=player,
    )


def flood_fill(grid: Sequence[str], start: tuple[int, int]) -> list[str]:
    """Return a copy of the grid with every cell reachable from start marked F."""
    cells = [list(row) for row in grid]
    stack = [start]
    blocked = {Tile.WALL.value, Tile.FLOOD.value}
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        if cells[y][x] in blocked:
            continue
        cells[y][x] = Tile.FLOOD.value
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return ["".join(row) for row in cells]


def validate_path(grid: Sequence[str], start: tuple[int, int]) -> None:
    """Raise MapError unless every collectible and the exit can be reached."""
    filled = flood_fill(grid, start)
    targets = {Tile.COLLECTIBLE.value, Tile.EXIT.value}
    if any(char in targets for row in filled for char in row):
        raise MapError(WRONG_PATH)


def validate_map(grid: Sequence[str]) -> MapInfo:
    """Run every map check and return the map's description."""
    info = validate_format(grid)
    validate_path(grid, info.player)
    return info