"""
Demo script to exercise the game engine and the placement search.
"""
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from core.board import Board, START_POSITION
from core.game import Game
from core.pieces import Piece, PIECE_NAMES, all_orientations
from ai.agents.search_agent import SearchAgent
from ai.autoplay import Autoplayer
from ai.search.config import SearchConfig
from ai.search.solver import Searcher


def demo_pieces():
    """Show all piece shapes in every orientation."""
    print("=" * 60)
    print("PIECES")
    print("=" * 60)

    for name in PIECE_NAMES:
        print(f"\n{name}:")
        for orientation in all_orientations(Piece.from_name(name)):
            print(orientation)
            print()


def demo_search():
    """Solve one position with every configuration."""
    print("\n" + "=" * 60)
    print("SEARCH ON AN EMPTY BOARD")
    print("=" * 60)

    board = Board()
    piece = Piece.from_name("T")

    for strategy in ("bfs", "dfs"):
        for heuristic in ("height", "fill-wells", "clear-lines"):
            searcher = Searcher(SearchConfig.from_names(strategy, heuristic))
            result = searcher.search(board, piece, START_POSITION)
            moves = " ".join(move.value for move in result.solution)
            print(f"\n{strategy}/{heuristic}: expanded {result.expanded} nodes, "
                  f"best score {result.best_score}, landing at {result.best.position}")
            print(f"  Moves ({len(result.solution)}): {moves[:70]}{'...' if len(moves) > 70 else ''}")


def demo_autoplay(max_pieces=30):
    """Autoplay one game and show the final board."""
    print("\n" + "=" * 60)
    print("AUTOPLAY")
    print("=" * 60)

    config = SearchConfig.from_env()
    autoplayer = Autoplayer(SearchAgent(config), game=Game(seed=123), seed=123)
    result = autoplayer.run(max_pieces=max_pieces)

    print(f"\n{autoplayer.game}")
    print(f"\nConfig: {config.strategy.value}/{config.heuristic.value}")
    print(f"Pieces: {result.pieces}  Lines: {result.total_lines}  Score: {result.score}")


if __name__ == "__main__":
    print("Falling-Block Autoplayer - Demo")
    print("=" * 60)

    demo_pieces()
    demo_search()
    demo_autoplay()

    print("\n" + "=" * 60)
    print("Demo complete!")
