"""
Unit tests for the Game class and the scoring rules.
"""
import pytest
import numpy as np

from core.board import Board, START_POSITION
from core.game import Game
from core.pieces import Piece
from core.rules import ScoringSystem, RulesConfig, get_points, grav_speed, level_up


def bottom_row_gap_board(gap_cols):
    """Board whose bottom row is full except for the given columns."""
    grid = np.zeros((22, 10), dtype=np.int8)
    grid[21, :] = 1
    for col in gap_cols:
        grid[21, col] = 0
    return Board(grid)


class TestGame:
    """Tests for Game class."""

    def test_init(self):
        """Test game initialization spawns a piece."""
        game = Game(seed=42)

        assert game.piece is not None
        assert game.position == START_POSITION
        assert game.next_piece is not None
        assert game.next_piece.name != game.piece.name
        assert game.board.get_filled_cells() == 0
        assert not game.game_over

    def test_init_without_spawn(self):
        """Test creating a game without a piece."""
        game = Game(seed=42, spawn=False)
        assert game.piece is None

    def test_try_move_stops_at_wall(self):
        """Test shifting until the wall blocks the piece."""
        game = Game(seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("T"))

        assert game.try_move(-1, 0)
        assert game.try_move(-1, 0)
        assert game.try_move(-1, 0)
        assert not game.try_move(-1, 0)
        assert game.position == (1, 2)

    def test_try_rotate(self):
        """Test rotating in open space."""
        game = Game(seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("T"))

        assert game.try_rotate()
        assert game.piece == Piece.from_name("T").rotate()

    def test_try_rotate_blocked(self):
        """Test that a blocked rotation leaves the piece unchanged."""
        grid = np.zeros((22, 10), dtype=np.int8)
        grid[3, 4] = 1
        game = Game(board=Board(grid), seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("I"))

        assert not game.try_rotate()
        assert game.piece == Piece.from_name("I")

    def test_gravity_never_locks(self):
        """Test that gravity stops at the floor without locking."""
        game = Game(seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("T"))

        for _ in range(30):
            game.apply_gravity()

        assert game.position == (4, 21)
        assert game.piece is not None
        assert game.pieces_locked == 0

    def test_hard_drop(self):
        """Test hard drop locks at the bottom and spawns the next piece."""
        game = Game(seed=3)
        first = game.piece

        result = game.hard_drop()

        assert result.success
        assert game.pieces_locked == 1
        assert game.board.get_filled_cells() == 4
        assert np.any(game.board.grid[21, :] != 0)
        assert game.piece is not None
        assert game.piece.name != first.name

    def test_lock_clears_rows(self):
        """Test that completed rows collapse and score."""
        game = Game(board=bottom_row_gap_board([0, 1, 2, 3]), seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("I"), (1, 21))

        result = game.lock_piece()

        assert result.success
        assert result.rows_cleared == [21]
        assert result.flash is not None
        assert list(result.flash.grid[21, :]) == [9] * 10
        assert result.score_result.points == 40
        assert game.score == 40
        assert game.scoring.total_lines == 1
        assert game.board.get_filled_cells() == 0

    def test_lock_without_clear_has_no_flash(self):
        """Test that a lock clearing nothing has no flash frame."""
        game = Game(seed=1, spawn=False)
        game.spawn_piece(Piece.from_name("T"))

        result = game.hard_drop()

        assert result.rows_cleared == []
        assert result.flash is None

    def test_lock_without_piece(self):
        """Test locking with no piece fails gracefully."""
        game = Game(seed=1, spawn=False)
        result = game.lock_piece()

        assert not result.success
        assert result.error is not None

    def test_game_over_when_spawn_blocked(self):
        """Test that a blocked spawn ends the game."""
        grid = np.zeros((22, 10), dtype=np.int8)
        grid[1:3, :] = 1
        game = Game(board=Board(grid), seed=1)

        assert game.game_over
        assert not game.running
        assert game.piece is None

    def test_get_state(self):
        """Test getting a serializable game state."""
        game = Game(seed=42)
        state = game.get_state().to_dict()

        assert len(state['grid']) == 22
        assert state['piece'] == game.piece.name
        assert state['position'] == list(START_POSITION)
        assert state['score'] == 0
        assert state['game_over'] is False

    def test_reset(self):
        """Test resetting the game."""
        game = Game(seed=42)
        game.hard_drop()
        game.reset()

        assert game.board.get_filled_cells() == 0
        assert game.pieces_locked == 0
        assert game.score == 0
        assert game.piece is not None

    def test_str(self):
        """Test string representation."""
        game = Game(seed=42)
        s = str(game)

        assert "Score" in s
        assert "#" in s


class TestRules:
    """Tests for scoring and levelling."""

    def test_get_points(self):
        """Test points per rows cleared and level."""
        assert get_points(0, 1) == 0
        assert get_points(1, 1) == 40
        assert get_points(4, 1) == 1200
        assert get_points(2, 3) == 300

    def test_level_up(self):
        """Test the level-up threshold."""
        assert not level_up(9)
        assert level_up(10)

    def test_grav_speed(self):
        """Test gravity speeds."""
        assert grav_speed(0) == 887
        assert grav_speed(0, soft_drop=True) == 35
        assert grav_speed(99) == 50
        assert grav_speed(0, soft_drop=True, config=RulesConfig(soft_drop_speed=5)) == 5

    def test_scoring_levels_up(self):
        """Test level progression while scoring."""
        scoring = ScoringSystem()

        scoring.process_lock(4)
        scoring.process_lock(4)
        result = scoring.process_lock(2)

        assert result.leveled_up
        assert scoring.level == 1
        assert scoring.level_lines == 0
        assert scoring.total_lines == 10
        assert scoring.score == 1200 + 1200 + 100

        # Points now use the new level
        assert scoring.process_lock(1).points == 80

    def test_scoring_reset(self):
        """Test resetting the scoring system."""
        scoring = ScoringSystem()
        scoring.process_lock(1)
        scoring.reset()

        assert scoring.score == 0
        assert scoring.level == 0
