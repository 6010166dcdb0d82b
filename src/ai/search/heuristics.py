"""
Heuristics for rating resting placements.

Every heuristic scores a node whose piece has been virtually locked into its
board. Lower scores are better.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .moves import lock
from .node import Node

# Default and worst score, also used for absent nodes
DEFAULT_SCORE = 100


@dataclass
class HeuristicInfo:
    """Metadata about a heuristic for display and comparison."""
    id: str
    name: str
    short_desc: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
        }


class Heuristic(ABC):
    """Abstract base class for placement heuristics."""

    INFO: HeuristicInfo = HeuristicInfo(
        id="base",
        name="Base Heuristic",
        short_desc="Abstract base class"
    )

    def score(self, node: Optional[Node]) -> float:
        """Rate a locked node. Absent nodes get the default score."""
        if node is None:
            return DEFAULT_SCORE
        return self._score(node)

    def locked_score(self, node: Optional[Node]) -> float:
        """Virtually lock the node's piece, then rate the result."""
        return self.score(lock(node))

    @abstractmethod
    def _score(self, node: Node) -> float:
        pass

    @classmethod
    def get_info(cls) -> HeuristicInfo:
        return cls.INFO


class HeightHeuristic(Heuristic):
    """Keeps the stack low."""

    INFO = HeuristicInfo(
        id="height",
        name="Height",
        short_desc="Tower height after the piece locks; taller is worse"
    )

    def _score(self, node: Node) -> float:
        return node.board.tower_height()


class FillWellsHeuristic(Heuristic):
    """Rewards pieces that come to rest deeper in the board."""

    INFO = HeuristicInfo(
        id="fill-wells",
        name="Fill Wells",
        short_desc="Prefers the lowest resting row for the piece"
    )

    def _score(self, node: Node) -> float:
        return DEFAULT_SCORE - node.position[1]


class ClearLinesHeuristic(Heuristic):
    """Rewards placements that complete rows."""

    INFO = HeuristicInfo(
        id="clear-lines",
        name="Clear Lines",
        short_desc="Prefers placements completing the most rows"
    )

    def _score(self, node: Node) -> float:
        return DEFAULT_SCORE - len(node.board.filled_row_indices())
