"""
Live game state for the falling-block game.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Any
import numpy as np

from .board import Board, START_POSITION
from .pieces import Piece, PieceGenerator
from .rules import ScoringSystem, RulesConfig, ScoreResult

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Serializable snapshot of the live game."""
    grid: np.ndarray
    piece: Optional[str]
    piece_coords: Optional[List[Tuple[int, int]]]
    position: Optional[Tuple[int, int]]
    next_piece: Optional[str]
    score: int
    level: int
    total_lines: int
    game_over: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'grid': self.grid.tolist(),
            'piece': self.piece,
            'piece_coords': [list(c) for c in self.piece_coords] if self.piece_coords else None,
            'position': list(self.position) if self.position else None,
            'next_piece': self.next_piece,
            'score': self.score,
            'level': self.level,
            'total_lines': self.total_lines,
            'game_over': self.game_over
        }


@dataclass
class LockResult:
    """Result of locking the current piece into the board."""
    success: bool
    rows_cleared: List[int]
    score_result: Optional[ScoreResult]
    spawned: bool
    game_over: bool
    error: Optional[str] = None
    # Board with the cleared rows highlighted, before they collapse
    flash: Optional[Board] = None


class Game:
    """
    Live game controller.

    The game works as follows:
    1. A piece spawns at the start position
    2. The piece is shifted, rotated and dropped until it locks
    3. Completed rows collapse and score points
    4. The next piece spawns; the game ends when it doesn't fit
    """

    def __init__(
        self,
        generator: Optional[PieceGenerator] = None,
        rules_config: Optional[RulesConfig] = None,
        board: Optional[Board] = None,
        seed: Optional[int] = None,
        spawn: bool = True
    ):
        """
        Initialize a new game.

        Args:
            generator: Piece generator to use. Creates default if None.
            rules_config: Scoring configuration. Uses defaults if None.
            board: Starting board. Empty if None.
            seed: Random seed for reproducible games.
            spawn: Spawn the first piece immediately.
        """
        self.board = board or Board()
        self.generator = generator or PieceGenerator(seed=seed)
        self.scoring = ScoringSystem(rules_config)

        self.piece: Optional[Piece] = None
        self.position: Optional[Tuple[int, int]] = None
        self.next_piece: Optional[Piece] = None

        self.soft_drop = False
        self.running = True
        self.game_over = False
        self.pieces_locked = 0

        if spawn:
            self.try_spawn_piece()

    @property
    def score(self) -> int:
        return self.scoring.score

    @property
    def level(self) -> int:
        return self.scoring.level

    def spawn_piece(self, piece: Piece, position: Tuple[int, int] = START_POSITION):
        """Place the given piece at a position without any checks."""
        self.piece = piece
        self.position = position

    def try_spawn_piece(self) -> bool:
        """
        Spawn the preview piece at the start position if it fits.

        Returns:
            True if the piece spawned, False if the game is over
        """
        piece = self.next_piece or self.generator.generate_one()
        self.next_piece = self.generator.generate_different(piece)
        x, y = START_POSITION

        if self.board.piece_fits(piece, x, y):
            self.spawn_piece(piece)
            return True

        # Show the piece that failed to spawn behind the stack
        self.board = self.board.write_piece_behind(piece, x, y)
        self.end_game()
        return False

    def end_game(self):
        """Stop the game; the board is full."""
        self.piece = None
        self.game_over = True
        self.running = False
        logger.info("Game over after %d pieces, score %d", self.pieces_locked, self.score)

    def piece_fits(self) -> bool:
        """Check whether the current piece fits at its current position."""
        if self.piece is None:
            return False
        x, y = self.position
        return self.board.piece_fits(self.piece, x, y)

    def try_move(self, dx: int, dy: int) -> bool:
        """Try moving the current piece by the given offset."""
        if self.piece is None:
            return False
        x, y = self.position
        nx, ny = x + dx, y + dy
        if self.board.piece_fits(self.piece, nx, ny):
            self.position = (nx, ny)
            return True
        return False

    def try_rotate(self) -> bool:
        """Try rotating the current piece in place."""
        if self.piece is None:
            return False
        x, y = self.position
        new_piece = self.piece.rotate()
        if self.board.piece_fits(new_piece, x, y):
            self.piece = new_piece
            return True
        return False

    def apply_gravity(self) -> bool:
        """Move the current piece down one row if possible. Never locks."""
        return self.try_move(0, 1)

    def hard_drop(self) -> LockResult:
        """Drop the current piece as far as it goes and lock it."""
        if self.piece is not None:
            x, y = self.position
            self.position = (x, self.board.hard_drop_y(self.piece, x, y))
        return self.lock_piece()

    def lock_piece(self) -> LockResult:
        """
        Lock the current piece into the board, collapse filled rows and spawn
        the next piece.

        Returns:
            LockResult with information about the lock outcome
        """
        if self.piece is None:
            return LockResult(
                success=False,
                rows_cleared=[],
                score_result=None,
                spawned=False,
                game_over=self.game_over,
                error="No piece to lock"
            )

        x, y = self.position
        board = self.board.write_piece(self.piece, x, y)
        rows = sorted(board.filled_row_indices())

        flash = board.highlight_rows(rows) if rows else None
        self.board = board.collapse_rows(rows)
        self.piece = None
        self.position = None
        self.soft_drop = False
        self.pieces_locked += 1

        score_result = self.scoring.process_lock(len(rows))
        spawned = self.try_spawn_piece()

        return LockResult(
            success=True,
            rows_cleared=rows,
            score_result=score_result,
            spawned=spawned,
            game_over=self.game_over,
            flash=flash
        )

    def get_state(self) -> GameState:
        """Get the current game state."""
        return GameState(
            grid=self.board.to_array(),
            piece=self.piece.name if self.piece else None,
            piece_coords=list(self.piece.coords) if self.piece else None,
            position=self.position,
            next_piece=self.next_piece.name if self.next_piece else None,
            score=self.scoring.score,
            level=self.scoring.level,
            total_lines=self.scoring.total_lines,
            game_over=self.game_over
        )

    def reset(self):
        """Reset the game to initial state."""
        self.board = Board.empty(self.board.n_rows, self.board.n_cols)
        self.scoring.reset()
        self.piece = None
        self.position = None
        self.next_piece = None
        self.soft_drop = False
        self.running = True
        self.game_over = False
        self.pieces_locked = 0
        self.try_spawn_piece()

    def __str__(self) -> str:
        """String representation of the game state."""
        board = self.board
        if self.piece is not None:
            x, y = self.position
            board = board.write_piece(self.piece, x, y)

        lines = [
            f"Pieces: {self.pieces_locked}  Score: {self.score}  "
            f"Level: {self.level}  Lines: {self.scoring.total_lines}",
            "",
            str(board),
        ]
        if self.next_piece is not None:
            lines.append(f"Next: {self.next_piece.name}")

        if self.game_over:
            lines.append("\n*** GAME OVER ***")

        return "\n".join(lines)
