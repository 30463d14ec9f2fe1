# board.py
import pygame

from engine_client import EMPTY
from piece import PIECE_CHARS, SHADOW
from settings import SPRITE_BASE_SIZE

BOARD_SIZE = 8
FILES = "ABCDEFGH"


def square_name(square):
    file, rank = square
    if not (0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE):
        raise ValueError(f"Square out of range: {square!r}")
    return f"{FILES[file]}{rank + 1}"


def parse_square(name):
    """Parse algebraic notation ("E4") into a zero-based (file, rank) pair.

    Malformed names raise ValueError; the rules engine is the only producer of
    these strings so callers treat it as a broken contract and let it propagate.
    """
    if not isinstance(name, str) or len(name) != 2:
        raise ValueError(f"Malformed square: {name!r}")
    letter, digit = name[0].upper(), name[1]
    if letter not in FILES or digit not in "12345678":
        raise ValueError(f"Malformed square: {name!r}")
    return FILES.index(letter), int(digit) - 1


def piece_at(snapshot, square):
    """Character on the square in a board snapshot, None if empty.

    The snapshot holds one line per rank, rank 8 first.
    """
    file, rank = square
    rows = snapshot.split("\n")
    ch = rows[BOARD_SIZE - 1 - rank][file]
    return None if ch == EMPTY else ch


def tile_color(square, profile):
    # A1 is a dark square
    file, rank = square
    return profile["tile_dark"] if (file + rank) % 2 == 0 else profile["tile_light"]


class Board:
    def __init__(self, profile: dict):
        self.profile = profile
        self.square_size = profile["tile_size"]
        self.margin = profile["margin"]
        self.flipped = profile["flipped"]

    def _to_view_coords(self, square: tuple):
        file, rank = square
        row = BOARD_SIZE - 1 - rank if self.flipped else rank
        return row, file

    def to_screen(self, square: tuple):
        row, col = self._to_view_coords(square)
        s = self.square_size
        return (col + self.margin) * s, (row + self.margin) * s

    def screen_to_square(self, pos: tuple):
        x, y = pos
        col = int(x // self.square_size) - self.margin
        row = int(y // self.square_size) - self.margin
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        rank = BOARD_SIZE - 1 - row if self.flipped else row
        return col, rank

    def draw_squares(self, screen):
        s = self.square_size
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                x, y = self.to_screen((file, rank))
                pygame.draw.rect(screen, tile_color((file, rank), self.profile), (x, y, s, s))

    def draw_highlights(self, screen, squares: list):
        if not squares:
            return
        s = self.square_size
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for square in squares:
            x, y = self.to_screen(square)
            pygame.draw.rect(overlay, self.profile["highlight"], (x, y, s, s))
        screen.blit(overlay, (0, 0))

    def draw_pieces(self, screen, snapshot: str, sprites):
        lift = self.profile["piece_lift"] * self.square_size / SPRITE_BASE_SIZE
        for row_idx, line in enumerate(snapshot.split("\n")):
            rank = BOARD_SIZE - 1 - row_idx
            for file, ch in enumerate(line):
                if ch == EMPTY:
                    continue
                if ch not in PIECE_CHARS:
                    raise ValueError(f"Unknown piece character {ch!r} in board snapshot")
                x, y = self.to_screen((file, rank))
                if self.profile["shadow"]:
                    screen.blit(sprites[SHADOW], (x, y))
                screen.blit(sprites[ch], (x, y - lift))
