"""
Launch the autoplayer webapp.

Usage:
    TETRIS_SEARCH_STRATEGY=bfs TETRIS_HEURISTIC=fill-wells python scripts/run_webapp.py

Then open http://127.0.0.1:8000/docs in your browser.
"""
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.app import main, SEARCH_CONFIG

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    print("=" * 60)
    print("  Falling-Block Autoplayer")
    print("=" * 60)
    print()
    print("Open http://127.0.0.1:8000/docs in your browser")
    print()
    print(f"Search strategy: {SEARCH_CONFIG.strategy.value}")
    print(f"Heuristic:       {SEARCH_CONFIG.heuristic.value}")
    print()
    main()
