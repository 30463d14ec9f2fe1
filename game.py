import logging
import os
import sys

import pygame
import pyperclip

from settings import *
from board import Board, square_name
from engine_client import RulesEngine
from piece import AssetError, load_image, load_sprites
from renderer import GameRenderer
from selection import Selection

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, profile_name=DEFAULT_PROFILE, resource_dir=RESOURCE_DIR):
        self.profile = get_profile(profile_name)
        self.resource_dir = resource_dir

        pygame.init()
        self.screen = pygame.display.set_mode(screen_size(self.profile))
        pygame.display.set_caption(WINDOW_TITLE)
        self._set_icon()

        # Model
        self.engine = RulesEngine()
        self.selection = Selection(self.profile["click_mode"])

        # View
        self.board_visual = Board(self.profile)
        self.sprites = load_sprites(resource_dir, self.profile["tile_size"])
        self.renderer = GameRenderer(self.screen, self.profile, self.sprites)

        self.running = True
        self.clock = pygame.time.Clock()
        logger.info("Started with %s layout, %s clicks", self.profile["name"], self.selection.mode)

    def _set_icon(self):
        try:
            pygame.display.set_icon(load_image(os.path.join(self.resource_dir, ICON_FILE)))
        except AssetError as e:
            logger.warning("No window icon: %s", e)

    def reset_game(self):
        self.engine.new_game()
        self.selection.clear()

    def run(self):
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.renderer.draw_game(self)
            self.clock.tick(FPS)
        pygame.quit()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self.handle_click(event.pos)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_n:
                self.reset_game()
            elif event.key == pygame.K_c:
                self.copy_pgn()

    def handle_click(self, pos):
        square = self.board_visual.screen_to_square(pos)
        if square is None:
            logger.debug("Click at %s is off the board", pos)
            return
        move = self.selection.click(square, self.engine)
        if move:
            logger.debug("Sent %s -> %s, state is now %s",
                         move[0], move[1], self.engine.game_state().value)
        elif self.selection.is_active:
            logger.debug("Selected %s with %d candidates",
                         square_name(self.selection.square), len(self.selection.candidates))

    def copy_pgn(self):
        try:
            pyperclip.copy(self.engine.pgn())
        except pyperclip.PyperclipException as e:
            logger.warning("Could not copy PGN: %s", e)
            return False
        logger.info("Copied PGN (%d moves) to clipboard", self.engine.move_count())
        return True


def main(profile_name=DEFAULT_PROFILE, resource_dir=RESOURCE_DIR):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        game = Game(profile_name, resource_dir)
    except (AssetError, pygame.error) as e:
        logger.error("Failed to start: %s", e)
        pygame.quit()
        sys.exit(1)
    game.run()


if __name__ == "__main__":
    main()
