"""Tile images and the choice of image for each map cell."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pygame

ASSET_DIR = "./assets.d/img.d"

WALL = "wall.xpm"
FLOOR = "floor.xpm"
COLLECTIBLE = "collectible.xpm"
PLAYER_IMAGES = ("mario-w.xpm", "mario-d.xpm", "mario-s.xpm", "mario-a.xpm")
EXIT_IMAGES = (
    "exit-close.xpm",
    "exit-open.xpm",
    "exit-up.xpm",
    "exit-right.xpm",
    "exit-down.xpm",
    "exit-left.xpm",
)
ALL_IMAGES = (WALL, FLOOR, COLLECTIBLE, *PLAYER_IMAGES, *EXIT_IMAGES)


def _pick(names: tuple[str, ...], index: int, what: str) -> str:
    if not 0 <= index < len(names):
        raise ValueError(f"{what} position must be in 0..{len(names) - 1}")
    return names[index]


def tile_name(cell: str, player_position: int, exit_position: int) -> str:
    """Return the image file name that shows ``cell``."""
    if cell == "1":
        return WALL
    if cell == "P":
        return _pick(PLAYER_IMAGES, player_position, "player")
    if cell == "C":
        return COLLECTIBLE
    if cell == "E":
        return _pick(EXIT_IMAGES, exit_position, "exit")
    return FLOOR


def image_path(name: str, asset_dir: str | os.PathLike[str] = ASSET_DIR) -> str:
    """Return the path of the image file ``name`` inside ``asset_dir``."""
    return os.path.join(os.fspath(asset_dir), name)


@dataclass
class Sprites:
    """The loaded tile images, keyed by file name."""

    images: dict[str, Any] = field(default_factory=dict)

    def image_for(self, cell: str, player_position: int, exit_position: int) -> Any:
        """Return the image that shows ``cell``."""
        return self.images[tile_name(cell, player_position, exit_position)]


def load_sprites(asset_dir: str | os.PathLike[str] = ASSET_DIR) -> Sprites:
    """Load every tile image from ``asset_dir``.

    Raises ``FileNotFoundError`` when an image file is missing.
    """
    images = {}
    for name in ALL_IMAGES:
        path = image_path(name, asset_dir)
        if not os.path.isfile(path):
            raise FileNotFoundError(path)
        images[name] = pygame.image.load(path)
    return Sprites(images)