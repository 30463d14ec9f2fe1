import logging

from board import parse_square, piece_at, square_name
from settings import CLICK_MODE_CANCEL, CLICK_MODE_RESELECT

logger = logging.getLogger(__name__)

CLICK_MODES = (CLICK_MODE_CANCEL, CLICK_MODE_RESELECT)


class Selection:
    """Selected square plus its candidate destinations.

    Idle while ``square`` is None. ``square`` and ``candidates`` are only ever
    assigned together.
    """

    def __init__(self, mode=CLICK_MODE_CANCEL):
        if mode not in CLICK_MODES:
            raise ValueError(f"Unknown click mode {mode!r}, expected one of {CLICK_MODES}")
        self.mode = mode
        self.square = None
        self.candidates = []

    @property
    def is_active(self):
        return self.square is not None

    def clear(self):
        self.square, self.candidates = None, []

    def click(self, square, engine):
        """Feed a click on ``square`` into the state machine.

        Returns the (from, to) names of the move handed to the engine, or None.
        """
        if self.square is None:
            self._try_select(square, engine)
            return None

        if square == self.square:
            self.clear()
            return None

        if square in self.candidates:
            move = square_name(self.square), square_name(square)
            engine.apply_move(*move)
            self.clear()
            return move

        if self.mode == CLICK_MODE_RESELECT:
            self._try_select(square, engine)
        else:
            self.clear()
        return None

    def _try_select(self, square, engine):
        piece = piece_at(engine.current_board(), square)
        if piece is None or piece.isupper() != engine.is_white_turn():
            logger.debug("Ignoring click on %s", square_name(square))
            self.clear()
            return
        moves = engine.legal_destinations(square_name(square)) or []
        self.square, self.candidates = square, [parse_square(m) for m in moves]
