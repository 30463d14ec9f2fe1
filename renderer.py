import pygame


def status_text(state):
    return f"Game is {state.value}."


class GameRenderer:
    def __init__(self, screen, profile, sprites):
        self.screen = screen
        self.profile = profile
        self.sprites = sprites
        self._init_fonts()

    def _init_fonts(self):
        self.font_status = pygame.font.Font(None, 30)

    def draw_game(self, game):
        self.screen.fill(self.profile["bg_main"])

        # 1. Board, candidate squares, pieces
        game.board_visual.draw_squares(self.screen)
        game.board_visual.draw_highlights(self.screen, game.selection.candidates)
        game.board_visual.draw_pieces(self.screen, game.engine.current_board(), self.sprites)

        # 2. Status line
        self._draw_status(status_text(game.engine.game_state()))

        pygame.display.flip()

    def _draw_status(self, text):
        surf = self.font_status.render(text, True, self.profile["status_text"])
        rect = surf.get_rect()
        rect.centerx = self.screen.get_width() // 2
        bar = self.profile["status_bar"]
        if bar:
            rect.centery = self.screen.get_height() - bar // 2
        else:
            rect.top = 14
        pygame.draw.rect(self.screen, self.profile["status_box"], rect.inflate(16, 4))
        self.screen.blit(surf, rect)
