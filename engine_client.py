import enum
import logging

import chess
import chess.pgn

logger = logging.getLogger(__name__)

EMPTY = "*"


class GameState(enum.Enum):
    ONGOING = "Ongoing"
    CHECK = "Check"
    CHECKMATE = "Checkmate"
    STALEMATE = "Stalemate"
    DRAW = "Draw"


FINISHED = frozenset((GameState.CHECKMATE, GameState.STALEMATE, GameState.DRAW))


class RulesEngine:
    """Thin adapter over python-chess.

    Squares cross this boundary as upper-case algebraic names ("E4"), boards
    as 8 lines of 8 characters (rank 8 first, ``*`` for empty squares).
    """

    def __init__(self, fen=None):
        self.start_fen = fen or chess.STARTING_FEN
        self._board = chess.Board(self.start_fen)

    def new_game(self):
        self._board = chess.Board(self.start_fen)
        logger.info("New game")
        return self

    def current_board(self):
        rows = []
        for rank in range(7, -1, -1):
            row = ""
            for file in range(8):
                piece = self._board.piece_at(chess.square(file, rank))
                row += piece.symbol() if piece else EMPTY
            rows.append(row)
        return "\n".join(rows)

    def game_state(self):
        b = self._board
        if b.is_checkmate():
            return GameState.CHECKMATE
        if b.is_stalemate():
            return GameState.STALEMATE
        # only draws that have happened, not ones the next move could claim
        if (b.is_insufficient_material() or b.is_seventyfive_moves()
                or b.is_fivefold_repetition() or b.is_repetition(3)
                or b.halfmove_clock >= 100):
            return GameState.DRAW
        if b.is_check():
            return GameState.CHECK
        return GameState.ONGOING

    def is_game_over(self):
        return self.game_state() in FINISHED

    def is_white_turn(self):
        return self._board.turn == chess.WHITE

    def legal_destinations(self, square):
        src = chess.parse_square(square.lower())
        if self.is_game_over() or self._board.piece_at(src) is None:
            return None
        dests = []
        for m in self._board.legal_moves:
            if m.from_square == src:
                name = chess.square_name(m.to_square).upper()
                # promotions yield one move per piece type
                if name not in dests:
                    dests.append(name)
        return dests or None

    def apply_move(self, src, dst):
        """Play src -> dst if legal. Pawns reaching the last rank become queens."""
        from_sq = chess.parse_square(src.lower())
        to_sq = chess.parse_square(dst.lower())
        promotion = None
        if (self._board.piece_type_at(from_sq) == chess.PAWN
                and chess.square_rank(to_sq) in (0, 7)):
            promotion = chess.QUEEN
        move = chess.Move(from_sq, to_sq, promotion=promotion)
        if self.is_game_over():
            logger.debug("Game is over, ignoring %s%s", src, dst)
            return False
        if move not in self._board.legal_moves:
            logger.debug("Rejected illegal move %s%s", src, dst)
            return False
        san = self._board.san(move)
        self._board.push(move)
        logger.info("Played %s (%s -> %s)", san, src, dst)
        return True

    def move_count(self):
        return len(self._board.move_stack)

    def pgn(self):
        return str(chess.pgn.Game.from_board(self._board))
