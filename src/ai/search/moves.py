"""
Move generation for the placement search.

These functions manipulate search nodes only; they never touch the live game.
"""
from typing import AbstractSet, List, Optional

from .node import MoveToken, Node


def shift(node: Node, dx: int) -> Optional[Node]:
    """Shift the piece horizontally. Returns None if it doesn't fit."""
    x, y = node.position
    if not node.board.piece_fits(node.piece, x + dx, y):
        return None
    move = MoveToken.SHIFT_LEFT if dx < 0 else MoveToken.SHIFT_RIGHT
    return node.with_move(move, position=(x + dx, y))


def move_down(node: Node) -> Node:
    """Step the piece down one row, or mark it locked where it is."""
    x, y = node.position
    if node.board.piece_fits(node.piece, x, y + 1):
        return node.with_move(MoveToken.DOWN, position=(x, y + 1))
    return node.with_move(MoveToken.DOWN, locked=True)


def rotate(node: Node) -> Optional[Node]:
    """Rotate the piece in place. Returns None if it doesn't fit."""
    x, y = node.position
    piece = node.piece.rotate()
    if not node.board.piece_fits(piece, x, y):
        return None
    return node.with_move(MoveToken.ROTATE, piece=piece)


def is_resting(node: Node) -> bool:
    """True if one more step down would lock the piece."""
    return move_down(node).locked


def lock(node: Optional[Node]) -> Optional[Node]:
    """
    Virtually lock the piece: a copy of the node whose board has the piece
    written in. The given node is left untouched.
    """
    if node is None:
        return None
    x, y = node.position
    return Node(
        piece=node.piece,
        position=node.position,
        board=node.board.write_piece(node.piece, x, y),
        locked=True,
        solution=node.solution,
    )


def expand(node: Node, visited: AbstractSet = frozenset()) -> List[Node]:
    """
    Neighbor states of a node: shift left, shift right, step down, rotate.

    Locked children are terminal and invalid children are dead ends, so both
    are dropped, as is any child whose (piece, position) key was already
    visited.
    """
    children = [
        shift(node, -1),
        shift(node, 1),
        move_down(node),
        rotate(node),
    ]
    return [
        child for child in children
        if child is not None and not child.locked and child.key not in visited
    ]
