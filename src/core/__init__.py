from .board import Board, START_POSITION
from .pieces import Piece, PieceGenerator
from .game import Game

__all__ = ["Board", "START_POSITION", "Piece", "PieceGenerator", "Game"]
