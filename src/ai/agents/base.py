"""
Base agent interface for the falling-block autoplayer.
"""
from abc import ABC, abstractmethod
from typing import List

from core.game import Game
from ai.search.node import MoveToken


class BaseAgent(ABC):
    """
    Abstract base class for all game-playing agents.

    An agent receives the live game and plans the moves for the current piece.
    """

    def __init__(self, name: str = "BaseAgent"):
        self.name = name

    @abstractmethod
    def plan(self, game: Game) -> List[MoveToken]:
        """
        Plan the moves for the current piece.

        Args:
            game: The current game instance

        Returns:
            Moves newest first. Empty if the piece can't be placed.
        """
        pass

    def reset(self):
        """Reset any internal state (called at the start of each game)."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
