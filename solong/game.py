"""Game state and player movement."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from solong.level import COLLECTIBLE, EXIT, FLOOR, PLAYER, Level


class Direction(Enum):
    """A step on the map as (dx, dy); y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveOutcome(Enum):
    """What a move attempt did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


def find_positions(
    grid: Sequence[Sequence[str]],
) -> tuple[tuple[int, int], tuple[int, int], int]:
    """Return the player position, the exit position and the collectible count.

    Positions are (x, y); where a tile occurs more than once, the last one
    in reading order is reported.
    """
    player = (0, 0)
    exit_position = (0, 0)
    collectibles = 0
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == COLLECTIBLE:
                collectibles += 1
            elif char == PLAYER:
                player = (x, y)
            elif char == EXIT:
                exit_position = (x, y)
    return player, exit_position, collectibles


@dataclass
class Game:
    """A game in progress on a mutable copy of a level's map."""

    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    moves: int = 0
    finished: bool = False

    @classmethod
    def from_level(cls, level: Level) -> Game:
        """Start a game on a validated level."""
        grid = [list(row) for row in level.rows]
        player, exit_position, collectibles = find_positions(grid)
        return cls(grid, player, exit_position, collectibles)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile(self, x: int, y: int) -> str:
        """Return the map character at column x, row y."""
        return self.grid[y][x]

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one step.

        Reaching the exit with every collectible taken wins the game; walls
        and an exit that is still locked block the move.
        """
        if self.finished:
            raise RuntimeError("the game is over")
        x, y = self.player
        tx, ty = x + direction.dx, y + direction.dy
        target = self.grid[ty][tx]
        if target == EXIT and self.collectibles == 0:
            self.moves += 1
            self.finished = True
            return MoveOutcome.WON
        if target not in (FLOOR, COLLECTIBLE):
            return MoveOutcome.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.grid[ty][tx] = PLAYER
        self.grid[y][x] = FLOOR
        self.player = (tx, ty)
        self.moves += 1
        return MoveOutcome.MOVED