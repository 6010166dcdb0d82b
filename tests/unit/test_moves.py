"""
Unit tests for search nodes, move generation and heuristics.
"""
import numpy as np

from core.board import Board, START_POSITION
from core.pieces import Piece
from ai.search.heuristics import (
    DEFAULT_SCORE,
    HeightHeuristic,
    FillWellsHeuristic,
    ClearLinesHeuristic,
)
from ai.search.moves import expand, is_resting, lock, move_down, rotate, shift
from ai.search.node import MoveToken, Node


def make_node(name="T", position=START_POSITION, board=None):
    return Node(piece=Piece.from_name(name), position=position, board=board or Board())


class TestMoves:
    """Tests for the individual move transforms."""

    def test_shift_left(self):
        """Test shifting appends the move and changes x."""
        child = shift(make_node(), -1)

        assert child.position == (3, 2)
        assert child.solution == (MoveToken.SHIFT_LEFT,)
        assert not child.locked

    def test_shift_right(self):
        """Test shifting right."""
        child = shift(make_node(), 1)
        assert child.position == (5, 2)
        assert child.solution == (MoveToken.SHIFT_RIGHT,)

    def test_shift_into_wall(self):
        """Test that a blocked shift yields no node."""
        assert shift(make_node(position=(1, 2)), -1) is None
        assert shift(make_node(position=(8, 2)), 1) is None

    def test_move_down(self):
        """Test stepping down in open space."""
        child = move_down(make_node())
        assert child.position == (4, 3)
        assert child.solution == (MoveToken.DOWN,)
        assert not child.locked

    def test_move_down_at_floor_locks(self):
        """Test that a blocked step down marks the node locked in place."""
        child = move_down(make_node(position=(4, 21)))

        assert child.locked
        assert child.position == (4, 21)
        assert child.solution == (MoveToken.DOWN,)

    def test_rotate(self):
        """Test rotating in open space."""
        child = rotate(make_node())
        assert child.piece == Piece.from_name("T").rotate()
        assert child.position == START_POSITION
        assert child.solution == (MoveToken.ROTATE,)

    def test_rotate_blocked(self):
        """Test that a blocked rotation yields no node."""
        grid = np.zeros((22, 10), dtype=np.int8)
        grid[3, 4] = 1
        assert rotate(make_node("I", board=Board(grid))) is None

    def test_solution_accumulates(self):
        """Test that the newest move is stored first."""
        node = rotate(move_down(shift(make_node(), -1)))
        assert node.solution == (MoveToken.ROTATE, MoveToken.DOWN, MoveToken.SHIFT_LEFT)

    def test_moves_do_not_mutate_parent(self):
        """Test that the parent node is unchanged."""
        node = make_node()
        shift(node, -1)
        move_down(node)
        assert node.position == START_POSITION
        assert node.solution == ()

    def test_is_resting(self):
        """Test detecting a piece that one more step would lock."""
        assert is_resting(make_node(position=(4, 21)))
        assert not is_resting(make_node())

    def test_lock(self):
        """Test the virtual lock writes the piece into a board copy."""
        node = make_node(position=(4, 21))
        locked = lock(node)

        assert locked.locked
        assert locked.board.get_filled_cells() == 4
        assert node.board.get_filled_cells() == 0
        assert lock(None) is None


class TestExpand:
    """Tests for neighbor generation."""

    def test_expand_open_space(self):
        """Test all four children in order."""
        children = expand(make_node())

        assert [child.solution for child in children] == [
            (MoveToken.SHIFT_LEFT,),
            (MoveToken.SHIFT_RIGHT,),
            (MoveToken.DOWN,),
            (MoveToken.ROTATE,),
        ]

    def test_expand_drops_locked_and_invalid(self):
        """Test that locked and unfitting children are dropped."""
        children = expand(make_node(position=(4, 21)))

        # Down locks, rotation pokes through the floor
        assert [child.solution for child in children] == [
            (MoveToken.SHIFT_LEFT,),
            (MoveToken.SHIFT_RIGHT,),
        ]

    def test_expand_drops_visited(self):
        """Test that children with visited keys are dropped."""
        node = make_node()
        visited = {(node.piece, (3, 2)), (node.piece, (4, 3))}

        children = expand(node, visited)

        assert [child.solution for child in children] == [
            (MoveToken.SHIFT_RIGHT,),
            (MoveToken.ROTATE,),
        ]

    def test_expand_o_rotation_is_self(self):
        """Test that rotating O gives the same key, dropped once visited."""
        node = make_node("O")
        assert len(expand(node)) == 4
        assert len(expand(node, {node.key})) == 3


class TestHeuristics:
    """Tests for the placement heuristics."""

    def test_absent_node_scores_default(self):
        """Test the default score for absent nodes."""
        for heuristic in (HeightHeuristic(), FillWellsHeuristic(), ClearLinesHeuristic()):
            assert heuristic.score(None) == DEFAULT_SCORE
            assert heuristic.locked_score(None) == DEFAULT_SCORE

    def test_height(self):
        """Test scoring by tower height after locking."""
        heuristic = HeightHeuristic()
        assert heuristic.locked_score(make_node(position=(4, 21))) == 2
        assert heuristic.locked_score(make_node("I", position=(4, 21))) == 1

    def test_fill_wells(self):
        """Test that deeper placements score lower."""
        heuristic = FillWellsHeuristic()
        low = heuristic.locked_score(make_node(position=(4, 21)))
        high = heuristic.locked_score(make_node(position=(4, 10)))

        assert low == DEFAULT_SCORE - 21
        assert low < high

    def test_clear_lines(self):
        """Test that completing a row scores lower."""
        grid = np.zeros((22, 10), dtype=np.int8)
        grid[21, 4:] = 1
        board = Board(grid)
        heuristic = ClearLinesHeuristic()

        completing = heuristic.locked_score(make_node("I", position=(1, 21), board=board))
        not_completing = heuristic.locked_score(make_node("I", position=(1, 20), board=board))

        assert completing == DEFAULT_SCORE - 1
        assert not_completing == DEFAULT_SCORE
        assert completing < not_completing

    def test_info(self):
        """Test heuristic metadata."""
        assert FillWellsHeuristic.get_info().id == "fill-wells"
        assert "id" in ClearLinesHeuristic.INFO.to_dict()
