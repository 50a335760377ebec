"""Loading and validation of .ber level maps."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from pathlib import Path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
VISITED = "*"
ALLOWED = frozenset(WALL + FLOOR + PLAYER + COLLECTIBLE + EXIT)

TEXTURES = ("wall", "collectible", "player", "floor", "exit")


class MapError(Exception):
    """Raised when a level file is unusable."""


@dataclass(frozen=True)
class Level:
    """A validated level: rectangular rows of map characters."""

    rows: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


def check_extension(path: str) -> None:
    """Require a name ending in ".ber" with something before the extension."""
    if len(path) <= 4 or not path.endswith(".ber") or path[-5] == "/":
        raise MapError("Wrong file extension")


def read_map(path: str | Path) -> list[str]:
    """Read the map file as lines without their newline characters."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("Invalid map") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def check_rectangular(lines: Sequence[str]) -> None:
    """Require every line to be as long as the first."""
    if lines and any(len(line) != len(lines[0]) for line in lines):
        raise MapError("Invalid map")


def check_characters(lines: Sequence[str]) -> None:
    """Require only map characters, one player, one exit and a collectible."""
    counts = {PLAYER: 0, COLLECTIBLE: 0, EXIT: 0}
    for line in lines:
        for char in line:
            if char not in ALLOWED:
                raise MapError("Invalid map")
            if char in counts:
                counts[char] += 1
    if counts[PLAYER] != 1 or counts[COLLECTIBLE] < 1 or counts[EXIT] != 1:
        raise MapError("Invalid map")


def check_walls(grid: Sequence[Sequence[str]]) -> None:
    """Require the map to be enclosed by walls."""
    if not grid:
        raise MapError("Invalid map")
    if any(row[0] != WALL or row[-1] != WALL for row in grid):
        raise MapError("Invalid map")
    if any(char != WALL for char in grid[0]) or any(char != WALL for char in grid[-1]):
        raise MapError("Invalid map")


def flood_fill(grid: MutableSequence[MutableSequence[str]], x: int, y: int) -> None:
    """Mark every cell reachable from (x, y) with '*'.

    The exit counts as reached but blocks the way: it is turned into a wall.
    """
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not (0 <= cy < len(grid) and 0 <= cx < len(grid[cy])):
            continue
        cell = grid[cy][cx]
        if cell == EXIT:
            grid[cy][cx] = WALL
        elif cell in (PLAYER, COLLECTIBLE, FLOOR):
            grid[cy][cx] = VISITED
            pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def check_playable(grid: Sequence[Sequence[str]]) -> None:
    """After a flood fill, require that no player, exit or collectible is left."""
    if any(char in (EXIT, PLAYER, COLLECTIBLE) for row in grid for char in row):
        raise MapError("Map not playable")


def _player_position(lines: Sequence[str]) -> tuple[int, int]:
    for y, line in enumerate(lines):
        x = line.find(PLAYER)
        if x >= 0:
            return x, y
    raise MapError("Invalid map")


def load_level(path: str) -> Level:
    """Read and validate a level file, raising MapError on any problem."""
    check_extension(path)
    lines = read_map(path)
    check_rectangular(lines)
    check_characters(lines)
    check_walls(lines)
    grid = [list(line) for line in lines]
    flood_fill(grid, *_player_position(lines))
    check_playable(grid)
    return Level(tuple(lines))


def missing_textures(directory: str | Path) -> list[Path]:
    """Return the texture files in directory that cannot be opened."""
    missing = []
    for name in TEXTURES:
        path = Path(directory) / f"{name}.xpm"
        try:
            with path.open("rb"):
                pass
        except OSError:
            missing.append(path)
    return missing