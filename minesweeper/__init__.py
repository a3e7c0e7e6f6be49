"""Minesweeper puzzle game: board rules, a pygame renderer and the playable app."""

__version__ = "1.0.0"
__all__ = ["game", "renderer", "app"]