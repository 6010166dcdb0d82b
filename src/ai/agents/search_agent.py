"""
Agent planning each piece with the exhaustive placement search.
"""
from typing import List, Optional

from .base import BaseAgent
from core.game import Game
from ai.search.config import SearchConfig, DEFAULT_CONFIG
from ai.search.node import MoveToken
from ai.search.solver import Searcher


class SearchAgent(BaseAgent):
    """
    Agent that searches every reachable placement of the current piece
    and plays the one its heuristic rates best.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        config = config or DEFAULT_CONFIG
        super().__init__(name=f"SearchAgent[{config.strategy.value}/{config.heuristic.value}]")
        self.searcher = Searcher(config)

    @property
    def config(self) -> SearchConfig:
        return self.searcher.config

    def plan(self, game: Game) -> List[MoveToken]:
        if game.piece is None:
            return []
        return self.searcher.find_solution(game.board, game.piece, game.position)
