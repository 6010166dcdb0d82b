"""
Traversal strategies for the placement search.

A search explores every (piece orientation, position) reachable from the
spawn node, keeping the best resting node seen so far. Both strategies are
explicit loops over a frontier; they differ only in which end of the frontier
they take the next node from.
"""
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, Optional, Set, Tuple

from .heuristics import DEFAULT_SCORE, Heuristic
from .moves import expand, is_resting
from .node import Node


@dataclass
class TraversalInfo:
    """Metadata about a traversal strategy."""
    id: str
    name: str
    short_desc: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
        }


@dataclass
class SearchSpace:
    """
    Scratch state of a single search.

    Created fresh for each search and discarded when it returns.
    """
    frontier: Deque[Node] = field(default_factory=deque)
    visited: Set[Tuple] = field(default_factory=set)
    best: Optional[Node] = None
    best_score: float = DEFAULT_SCORE
    expanded: int = 0

    def consider(self, node: Node, heuristic: Heuristic) -> bool:
        """
        Promote the node to best if it already rests on something and its
        locked score is strictly better than the current best's.

        Returns:
            True if the best node changed
        """
        if not is_resting(node):
            return False
        score = heuristic.locked_score(node)
        if self.best is None or score < self.best_score:
            self.best = node
            self.best_score = score
            return True
        return False


@dataclass
class SearchResult:
    """Outcome of a search."""
    best: Optional[Node]
    best_score: float
    expanded: int
    visited: int

    @property
    def solution(self):
        """Moves from the root to the best node, newest first. Empty if none was found."""
        return list(self.best.solution) if self.best is not None else []


SearchCallback = Callable[[Node, SearchSpace], None]


class Traversal(ABC):
    """Abstract base class for traversal strategies."""

    INFO: TraversalInfo = TraversalInfo(
        id="base",
        name="Base Traversal",
        short_desc="Abstract base class"
    )

    @abstractmethod
    def _pop(self, frontier: Deque[Node]) -> Node:
        """Take the next node to examine off the frontier."""
        pass

    def search(
        self,
        root: Node,
        heuristic: Heuristic,
        callback: Optional[SearchCallback] = None
    ) -> SearchResult:
        """
        Exhaustively search the move graph from the root node.

        Args:
            root: Spawn state of the piece with an empty solution
            heuristic: Scorer for resting placements
            callback: Optional callback(node, space) after each expansion

        Returns:
            SearchResult holding the best resting node, if any
        """
        space = SearchSpace(frontier=deque([root]))

        while space.frontier:
            node = self._pop(space.frontier)
            if node.key in space.visited:
                continue
            space.visited.add(node.key)

            children = expand(node, space.visited)
            space.consider(node, heuristic)
            space.frontier.extend(children)
            space.expanded += 1

            if callback:
                callback(node, space)

        return SearchResult(
            best=space.best,
            best_score=space.best_score,
            expanded=space.expanded,
            visited=len(space.visited)
        )

    @classmethod
    def get_info(cls) -> TraversalInfo:
        return cls.INFO


class BreadthFirstSearch(Traversal):
    """Examines nodes in the order they were discovered."""

    INFO = TraversalInfo(
        id="bfs",
        name="Breadth-First",
        short_desc="FIFO frontier; finds the shortest move sequence to each placement"
    )

    def _pop(self, frontier: Deque[Node]) -> Node:
        return frontier.popleft()


class DepthFirstSearch(Traversal):
    """Examines the most recently discovered node first."""

    INFO = TraversalInfo(
        id="dfs",
        name="Depth-First",
        short_desc="LIFO frontier; follows one move chain to its end before backtracking"
    )

    def _pop(self, frontier: Deque[Node]) -> Node:
        return frontier.pop()
