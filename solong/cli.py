"""Command line entry point: validate a level and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from solong.game import Game
from solong.level import TEXTURES, MapError, load_level, missing_textures
from solong.xpm import XpmError, load_xpm

TEXTURE_DIR = Path("textures")


def _error(message: str, stream=None) -> None:
    print(f"Error\n{message}", file=stream if stream is not None else sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the .ber map named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _error("Invalid number of arguments")
        return 0
    if missing_textures(TEXTURE_DIR):
        _error("Asset file missing")
        return 0
    try:
        level = load_level(args[0])
    except MapError as exc:
        _error(str(exc))
        return 0
    game = Game.from_level(level)
    try:
        textures = {name: load_xpm(TEXTURE_DIR / f"{name}.xpm") for name in TEXTURES}
    except XpmError:
        _error("Invalid asset", sys.stdout)
        return 0

    from solong.render import Renderer

    try:
        renderer = Renderer(game, textures)
    except ValueError:
        _error("Invalid asset", sys.stdout)
        return 0
    except RuntimeError:
        _error("Window initialization failed")
        return 1
    renderer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())