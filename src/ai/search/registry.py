"""
Registry - central place to access all traversals and heuristics.
"""
from typing import Dict, List, Type

from .heuristics import (
    Heuristic,
    HeuristicInfo,
    HeightHeuristic,
    FillWellsHeuristic,
    ClearLinesHeuristic,
)
from .traversal import (
    Traversal,
    TraversalInfo,
    BreadthFirstSearch,
    DepthFirstSearch,
)


TRAVERSALS: Dict[str, Type[Traversal]] = {
    'bfs': BreadthFirstSearch,
    'dfs': DepthFirstSearch,
}

HEURISTICS: Dict[str, Type[Heuristic]] = {
    'height': HeightHeuristic,
    'fill-wells': FillWellsHeuristic,
    'clear-lines': ClearLinesHeuristic,
}


def get_traversal(traversal_id: str) -> Traversal:
    """
    Get a traversal instance by ID.

    Raises:
        ValueError: If traversal_id is not found
    """
    if traversal_id not in TRAVERSALS:
        available = ", ".join(TRAVERSALS.keys())
        raise ValueError(f"Unknown search strategy: {traversal_id}. Available: {available}")

    return TRAVERSALS[traversal_id]()


def get_heuristic(heuristic_id: str) -> Heuristic:
    """
    Get a heuristic instance by ID.

    Raises:
        ValueError: If heuristic_id is not found
    """
    if heuristic_id not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {heuristic_id}. Available: {available}")

    return HEURISTICS[heuristic_id]()


def list_traversals() -> List[TraversalInfo]:
    """Get info about all available traversal strategies."""
    return [cls.INFO for cls in TRAVERSALS.values()]


def list_heuristics() -> List[HeuristicInfo]:
    """Get info about all available heuristics."""
    return [cls.INFO for cls in HEURISTICS.values()]
