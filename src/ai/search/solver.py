"""
Entry point of the placement search: find the moves for the current piece.
"""
import logging
from typing import List, Optional, Tuple

from core.board import Board
from core.pieces import Piece

from .config import SearchConfig, DEFAULT_CONFIG
from .heuristics import Heuristic
from .node import MoveToken, Node
from .registry import get_heuristic, get_traversal
from .traversal import SearchCallback, SearchResult, Traversal

logger = logging.getLogger(__name__)


class Searcher:
    """
    A search configuration resolved to concrete traversal and heuristic
    objects. Build it once at startup and reuse it for every piece.
    """

    def __init__(self, config: SearchConfig = DEFAULT_CONFIG):
        self.config = config
        self.traversal: Traversal = get_traversal(config.strategy.value)
        self.heuristic: Heuristic = get_heuristic(config.heuristic.value)

    def search(
        self,
        board: Board,
        piece: Piece,
        position: Tuple[int, int],
        callback: Optional[SearchCallback] = None
    ) -> SearchResult:
        """Search from the given spawn state. An unfitting piece yields no best node."""
        x, y = position
        if not board.piece_fits(piece, x, y):
            logger.debug("Piece %s does not fit at %s; nothing to search", piece.name, position)
            return SearchResult(best=None, best_score=self.heuristic.score(None), expanded=0, visited=0)

        root = Node(piece=piece, position=position, board=board)
        result = self.traversal.search(root, self.heuristic, callback)

        logger.debug(
            "%s/%s search for %s: expanded %d nodes, best score %s, %d moves",
            self.config.strategy.value, self.config.heuristic.value, piece.name,
            result.expanded, result.best_score, len(result.solution)
        )
        return result

    def find_solution(self, board: Board, piece: Piece, position: Tuple[int, int]) -> List[MoveToken]:
        """
        Moves leading the piece to its best resting placement, newest first.

        Returns:
            The move list; empty if the piece doesn't fit or can't move
        """
        return self.search(board, piece, position).solution

    def __repr__(self) -> str:
        return f"Searcher({self.config.strategy.value}, {self.config.heuristic.value})"


def find_solution(
    board: Board,
    piece: Piece,
    position: Tuple[int, int],
    config: SearchConfig = DEFAULT_CONFIG
) -> List[MoveToken]:
    """Convenience wrapper resolving the configuration for a single search."""
    return Searcher(config).find_solution(board, piece, position)
