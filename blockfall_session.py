
"""Game session: board, active piece, drop timing, game over"""
import logging
from enum import Enum, auto
from typing import Callable, List, Optional

from blockfall_board import Board, clear_lines, is_valid, new_board, place
from blockfall_config import CONFIG
from blockfall_input import Intent
from blockfall_piece import Anchor, Piece, rotate, spawn_piece
from blockfall_rng import UniformRandom

log = logging.getLogger(__name__)

class SessionState(Enum):
    IDLE = auto()
    ACTIVE = auto()
    GAME_OVER = auto()

MOVES = {
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
    Intent.SOFT_DROP: (0, 1),
}

class Session:
    """Single game session.

    ``tick`` is the per-frame gravity step and ``handle`` applies one input
    intent. Both do nothing unless the session is active, and every position
    or shape change goes through ``is_valid`` first.
    """
    def __init__(self, images=None, rng=None, drop_interval: Optional[int] = None):
        self.images = images if images is not None else []
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.drop_interval = drop_interval if drop_interval is not None else CONFIG["DROP_INTERVAL_MS"]
        self.on_game_over_changed: List[Callable[[bool], None]] = []

        self.board: Board = new_board()
        self.piece: Optional[Piece] = None
        self.anchor = self.spawn_anchor()
        self.last_drop_time = 0
        self.active = False
        self.state = SessionState.IDLE

    @staticmethod
    def spawn_anchor() -> Anchor:
        return Anchor(CONFIG["SPAWN_X"], CONFIG["SPAWN_Y"])

    def _emit(self, show_retry: bool) -> None:
        for cb in self.on_game_over_changed:
            cb(show_retry)

    # ----- lifecycle -----
    def start(self) -> None:
        self.board = new_board()
        self.piece = None
        self.anchor = self.spawn_anchor()
        self.last_drop_time = 0
        self.active = True
        self.state = SessionState.ACTIVE
        self._emit(False)
        log.info("session started (drop interval %d ms)", self.drop_interval)
        self.spawn()

    def restart(self) -> None:
        self.start()

    def spawn(self) -> Piece:
        self.piece = spawn_piece(self.rng, len(self.images))
        self.anchor = self.spawn_anchor()
        if not is_valid(self.board, self.piece.shape, self.anchor):
            self._game_over()
        return self.piece

    def _game_over(self) -> None:
        self.active = False
        self.state = SessionState.GAME_OVER
        log.info("game over")
        self._emit(True)

    # ----- frame -----
    def tick(self, now: int) -> bool:
        """Run at most one gravity step; True when the drop threshold was crossed."""
        if not self.active or self.piece is None:
            return False
        if now - self.last_drop_time <= self.drop_interval:
            return False
        if not self.try_move(0, 1):
            self.lock()
        self.last_drop_time = now
        return True

    def lock(self) -> None:
        place(self.board, self.piece, self.anchor)
        cleared = clear_lines(self.board)
        log.debug("placed kind %d at %s, %d line(s) cleared", self.piece.kind, tuple(self.anchor), cleared)
        self.spawn()

    # ----- input -----
    def try_move(self, dx: int, dy: int) -> bool:
        if not is_valid(self.board, self.piece.shape, self.anchor, dx, dy):
            return False
        self.anchor = Anchor(self.anchor.x + dx, self.anchor.y + dy)
        return True

    def try_rotate(self) -> bool:
        rotated = rotate(self.piece)
        if not is_valid(self.board, rotated.shape, self.anchor):
            return False
        self.piece = rotated
        return True

    def handle(self, intent: Intent) -> bool:
        if not self.active or self.piece is None:
            return False
        if intent is Intent.ROTATE:
            return self.try_rotate()
        return self.try_move(*MOVES[intent])
