import logging
import os
from types import MappingProxyType

import pygame

from settings import SPRITE_BASE_SIZE

logger = logging.getLogger(__name__)

SHADOW = "s"

# Fixed table: piece character -> image file (FEN letters, upper case is white)
SPRITE_FILES = (
    ("k", "black_king.png"),
    ("q", "black_queen.png"),
    ("r", "black_rook.png"),
    ("p", "black_pawn.png"),
    ("b", "black_bishop.png"),
    ("n", "black_knight.png"),
    ("K", "white_king.png"),
    ("Q", "white_queen.png"),
    ("R", "white_rook.png"),
    ("P", "white_pawn.png"),
    ("B", "white_bishop.png"),
    ("N", "white_knight.png"),
    (SHADOW, "shadow.png"),
)

PIECE_CHARS = frozenset(ch for ch, _ in SPRITE_FILES if ch != SHADOW)


class AssetError(RuntimeError):
    """A sprite or other required image could not be loaded."""


def load_image(path: str):
    if not os.path.exists(path):
        raise AssetError(f"Image not found at {path}")
    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        raise AssetError(f"Could not load image {path}: {e}") from e
    # convert_alpha needs a display surface
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def scale_sprite(image, tile_size: int):
    factor = tile_size / SPRITE_BASE_SIZE
    w, h = image.get_size()
    # nearest neighbour keeps the pixel art sharp
    return pygame.transform.scale(image, (round(w * factor), round(h * factor)))


def load_sprites(resource_dir: str, tile_size: int):
    """Load every sprite once and return a read-only char -> Surface mapping.

    Raises AssetError if any of the files is missing or unreadable.
    """
    sprites = {}
    for ch, filename in SPRITE_FILES:
        image = load_image(os.path.join(resource_dir, filename))
        sprites[ch] = scale_sprite(image, tile_size)
    logger.debug("Loaded %d sprites from %s", len(sprites), resource_dir)
    return MappingProxyType(sprites)
