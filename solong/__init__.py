"""A tile-based puzzle game: collect every item, then reach the exit."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "level", "game", "render", "cli"]