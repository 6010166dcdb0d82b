"""
Search nodes and move tokens.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from core.board import Board
from core.pieces import Piece


class MoveToken(str, Enum):
    """A single discrete move of the falling piece."""
    SHIFT_LEFT = "SL"
    SHIFT_RIGHT = "SR"
    DOWN = "D"
    ROTATE = "R"


@dataclass(frozen=True)
class Node:
    """
    A candidate search state.

    Absent/invalid states are represented by None rather than a Node.
    The board is shared by reference between nodes until a piece is written
    into it. `solution` holds the moves from the root, newest first, so
    the first move to play is the last element.
    """
    piece: Piece
    position: Tuple[int, int]
    board: Board
    locked: bool = False
    solution: Tuple[MoveToken, ...] = ()

    @property
    def key(self) -> Tuple[Piece, Tuple[int, int]]:
        """Visited-set identity. The board is identical for every unlocked node of a search."""
        return self.piece, self.position

    def with_move(self, move: MoveToken, **changes) -> Node:
        return replace(self, solution=(move,) + self.solution, **changes)
