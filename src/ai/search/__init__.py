"""
Placement search for the falling piece.

Explores every shift/drop/rotate sequence reachable from the spawn position
and returns the moves leading to the best resting placement.
"""
from .config import SearchConfig, SearchStrategy, HeuristicType, ConfigurationError
from .node import MoveToken, Node
from .registry import HEURISTICS, TRAVERSALS, get_heuristic, get_traversal, list_heuristics, list_traversals
from .solver import Searcher, find_solution

__all__ = [
    'SearchConfig',
    'SearchStrategy',
    'HeuristicType',
    'ConfigurationError',
    'MoveToken',
    'Node',
    'HEURISTICS',
    'TRAVERSALS',
    'get_heuristic',
    'get_traversal',
    'list_heuristics',
    'list_traversals',
    'Searcher',
    'find_solution',
]
