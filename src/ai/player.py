"""
Replays a planned move list against the live game, one move per tick.
"""
import logging
from typing import Iterator, Optional, Sequence

from core.game import Game, LockResult
from .search.node import MoveToken

logger = logging.getLogger(__name__)


class SolutionPlayer:
    """
    Applies a solution to the live game.

    Moves are consumed from the end of the solution. Solutions hold their
    newest move first, so the moves run in the order the search made them.
    Once every move has been applied the piece is locked into the board.
    """

    def __init__(self, game: Game):
        self.game = game
        self.last_lock: Optional[LockResult] = None

    def apply(self, move: MoveToken) -> bool:
        """Apply a single move to the live game. Returns whether it took effect."""
        if move == MoveToken.SHIFT_LEFT:
            return self.game.try_move(-1, 0)
        if move == MoveToken.SHIFT_RIGHT:
            return self.game.try_move(1, 0)
        if move == MoveToken.DOWN:
            return self.game.apply_gravity()
        if move == MoveToken.ROTATE:
            return self.game.try_rotate()
        raise ValueError(f"Unknown move: {move}")

    def play(self, solution: Sequence[MoveToken]) -> Iterator[MoveToken]:
        """
        Generator yielding after each applied move, so the host can run one
        move per tick. The final resumption locks the piece.

        An empty solution for a piece that doesn't fit means the board is
        full and ends the game instead of locking.
        """
        remaining = list(solution)
        self.last_lock = None

        if self.game.piece is None:
            return
        if not remaining and not self.game.piece_fits():
            self.game.end_game()
            return

        while remaining:
            move = remaining.pop()
            if not self.apply(move):
                logger.debug("Move %s had no effect at %s", move.value, self.game.position)
            yield move

        self.last_lock = self.game.lock_piece()

    def play_all(self, solution: Sequence[MoveToken]) -> Optional[LockResult]:
        """Apply the whole solution at once and lock the piece."""
        for _ in self.play(solution):
            pass
        return self.last_lock
