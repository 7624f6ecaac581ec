"""Tile sprites, errors and text and container helpers for a tile-based maze game."""

__version__ = "0.1.0"