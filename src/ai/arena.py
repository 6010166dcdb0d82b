"""
Arena for comparing search configurations.

Every configuration plays the same seeded piece sequences so the results
are directly comparable.
"""
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Callable, Sequence
import numpy as np

from .agents.search_agent import SearchAgent
from .autoplay import Autoplayer, GameResult
from .search.config import SearchConfig


@dataclass
class ConfigStats:
    """Accumulated statistics for one search configuration."""
    config: SearchConfig
    games_played: int = 0
    total_score: int = 0
    total_pieces: int = 0
    total_lines: int = 0
    max_score: int = 0
    scores: List[int] = field(default_factory=list)

    @property
    def config_id(self) -> str:
        return f"{self.config.strategy.value}/{self.config.heuristic.value}"

    @property
    def avg_score(self) -> float:
        return self.total_score / self.games_played if self.games_played else 0

    @property
    def avg_pieces(self) -> float:
        return self.total_pieces / self.games_played if self.games_played else 0

    @property
    def avg_lines(self) -> float:
        return self.total_lines / self.games_played if self.games_played else 0

    @property
    def score_std(self) -> float:
        return float(np.std(self.scores)) if self.scores else 0

    def record(self, result: GameResult):
        self.games_played += 1
        self.total_score += result.score
        self.total_pieces += result.pieces
        self.total_lines += result.total_lines
        self.max_score = max(self.max_score, result.score)
        self.scores.append(result.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'config': self.config.to_dict(),
            'games_played': self.games_played,
            'avg_score': self.avg_score,
            'max_score': self.max_score,
            'score_std': self.score_std,
            'avg_pieces': self.avg_pieces,
            'avg_lines': self.avg_lines,
        }


def play_game(
    config: SearchConfig,
    seed: Optional[int] = None,
    max_pieces: Optional[int] = None
) -> GameResult:
    """Play a single game with a search agent."""
    return Autoplayer(SearchAgent(config), seed=seed).run(max_pieces=max_pieces)


def compare_configs(
    configs: Sequence[SearchConfig],
    seeds: Sequence[int],
    max_pieces: Optional[int] = 50,
    callback: Optional[Callable] = None
) -> List[ConfigStats]:
    """
    Play every seed with every configuration.

    Args:
        configs: Configurations to compare
        seeds: Game seeds, shared by all configurations
        max_pieces: Piece limit per game (None plays to game over)
        callback: Optional callback(stats, result) after each game

    Returns:
        ConfigStats sorted by average lines cleared, then average score
    """
    all_stats = [ConfigStats(config=config) for config in configs]

    for stats in all_stats:
        for seed in seeds:
            result = play_game(stats.config, seed=seed, max_pieces=max_pieces)
            stats.record(result)
            if callback:
                callback(stats, result)

    return sorted(
        all_stats,
        key=lambda s: (s.avg_lines, s.avg_score),
        reverse=True
    )
