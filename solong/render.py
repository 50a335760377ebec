"""Drawing the map with pygame and handling keyboard input."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game, MoveOutcome  # noqa: E402
from solong.level import COLLECTIBLE, EXIT, PLAYER, WALL  # noqa: E402
from solong.xpm import XpmImage  # noqa: E402

TILE_SIZE = 45
TITLE = "so_long"

_SPRITES = {WALL: "wall", COLLECTIBLE: "collectible", EXIT: "exit", PLAYER: "player"}

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _require_tile(image: XpmImage, what: str) -> None:
    if image.width < TILE_SIZE or image.height < TILE_SIZE:
        raise ValueError(
            f"{what} image is {image.width}x{image.height}, "
            f"needs at least {TILE_SIZE}x{TILE_SIZE}"
        )


def compose_tile(floor: XpmImage, sprite: XpmImage | None = None) -> XpmImage:
    """Build one map tile: the floor, with the sprite laid over it.

    Sprite pixels equal to the sprite's top-left pixel are treated as
    see-through and leave the floor showing.
    """
    _require_tile(floor, "floor")
    rows = [list(row[:TILE_SIZE]) for row in floor.rows[:TILE_SIZE]]
    if sprite is not None:
        _require_tile(sprite, "sprite")
        key = sprite.rows[0][0]
        for out, src in zip(rows, sprite.rows[:TILE_SIZE]):
            for x, value in enumerate(src[:TILE_SIZE]):
                if value != key:
                    out[x] = value
    return XpmImage(TILE_SIZE, TILE_SIZE, tuple(tuple(row) for row in rows))


def key_to_direction(key: int) -> Direction | None:
    """Map an arrow key code to a direction, or None for any other key."""
    return _KEYS.get(key)


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for row in image.rows:
        for value in row:
            data += (value & 0xFFFFFF).to_bytes(3, "big")
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB").copy()


class Renderer:
    """Shows a game on a surface and drives it from key presses."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[str, XpmImage],
        surface: pygame.Surface | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.game = game
        self.output = output if output is not None else sys.stdout
        floor = textures["floor"]
        self._tiles = {
            char: _to_surface(compose_tile(floor, textures[name]))
            for char, name in _SPRITES.items()
        }
        self._floor = _to_surface(compose_tile(floor, None))
        if surface is None:
            pygame.display.init()
            surface = pygame.display.set_mode(
                (game.width * TILE_SIZE, game.height * TILE_SIZE)
            )
            pygame.display.set_caption(TITLE)
        self.surface = surface
        self.running = True

    def draw(self) -> None:
        """Paint the whole map onto the surface."""
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(self.game.grid):
            for x, char in enumerate(row):
                self.surface.blit(
                    self._tiles.get(char, self._floor), (x * TILE_SIZE, y * TILE_SIZE)
                )

    def handle_key(self, key: int) -> bool:
        """React to a key; return False once the game should close."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return False
        direction = key_to_direction(key)
        if direction is not None:
            outcome = self.game.move(direction)
            if outcome is not MoveOutcome.BLOCKED:
                print(f"moves count : {self.game.moves}", file=self.output)
            if outcome is MoveOutcome.WON:
                self.running = False
                return False
        self.draw()
        return True

    def run(self) -> None:
        """Show the window and process events until the game ends."""
        try:
            self.draw()
            pygame.display.flip()
            while self.running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYUP and self.handle_key(event.key):
                    pygame.display.flip()
        finally:
            pygame.quit()