"""
Benchmark every search configuration on the same seeded games.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ai.arena import compare_configs
from ai.search.config import SearchConfig, SearchStrategy, HeuristicType


def benchmark(n_games=5, max_pieces=50):
    """Benchmark all configurations."""
    configs = [
        SearchConfig(strategy=strategy, heuristic=heuristic)
        for strategy in SearchStrategy
        for heuristic in HeuristicType
    ]
    print(f"Benchmarking {len(configs)} configurations over {n_games} games "
          f"of up to {max_pieces} pieces each...\n")

    results = compare_configs(configs, seeds=range(n_games), max_pieces=max_pieces)

    print(f"{'Config':<20} {'Lines':>8} {'Score':>8} {'Max':>8} {'Std':>8} {'Pieces':>8}")
    print("=" * 64)

    for stats in results:
        print(f"{stats.config_id:<20} {stats.avg_lines:>8.1f} {stats.avg_score:>8.0f} "
              f"{stats.max_score:>8.0f} {stats.score_std:>8.1f} {stats.avg_pieces:>8.1f}")

    return results


if __name__ == "__main__":
    benchmark(n_games=5, max_pieces=50)
