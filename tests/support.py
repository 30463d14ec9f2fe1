import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from piece import SPRITE_FILES

PIECE_COLOR = (10, 200, 10)
SHADOW_COLOR = (200, 10, 200)


def make_sprite_dir(path, icon=False, skip=()):
    """Write solid 32x32 sprites for every table entry into ``path``."""
    pygame.init()
    for ch, filename in SPRITE_FILES:
        if ch in skip:
            continue
        surf = pygame.Surface((32, 32), pygame.SRCALPHA)
        if ch == "s":
            surf.fill(SHADOW_COLOR + (255,))
        else:
            surf.fill(PIECE_COLOR + (255,))
        pygame.image.save(surf, os.path.join(path, filename))
    if icon:
        pygame.image.save(pygame.Surface((32, 32)), os.path.join(path, "icon.png"))
    return path


class FakeEngine:
    """Scripted stand-in for RulesEngine."""

    def __init__(self, board, white_turn=True, destinations=None):
        self.board = board
        self.white_turn = white_turn
        self.destinations = destinations or {}
        self.applied = []
        self.queries = []

    def current_board(self):
        return self.board

    def is_white_turn(self):
        return self.white_turn

    def legal_destinations(self, square):
        self.queries.append(square)
        return self.destinations.get(square)

    def apply_move(self, src, dst):
        self.applied.append((src, dst))
        return True
