"""
Scoring, levelling and gravity speeds for the falling-block game.
"""
from dataclasses import dataclass, field
from typing import List, Optional


# Milliseconds per gravity step, indexed by level (last entry repeats)
LEVEL_SPEEDS: List[int] = [
    887, 820, 753, 686, 619, 552, 469, 368, 285, 184,
    167, 151, 134, 117, 100, 100, 84, 84, 67, 67, 50,
]


@dataclass
class RulesConfig:
    """Configuration for scoring and levelling."""
    # Base points for clearing 0, 1, 2, 3 or 4 rows at once (multiplied by level)
    line_points: List[int] = field(default_factory=lambda: [0, 40, 100, 300, 1200])

    # Rows needed within a level before levelling up
    lines_per_level: int = 10

    # Gravity speed while soft drop is held
    soft_drop_speed: int = 35


DEFAULT_RULES = RulesConfig()


@dataclass
class ScoreResult:
    """Result of scoring a locked piece."""
    points: int          # Points earned by this lock
    rows_cleared: int    # Number of rows cleared
    level: int           # Level after this lock
    leveled_up: bool


def get_points(rows_cleared: int, level: int, config: Optional[RulesConfig] = None) -> int:
    """Points for clearing the given number of rows at a (1-based) level."""
    cfg = config or DEFAULT_RULES
    n = min(rows_cleared, len(cfg.line_points) - 1)
    return cfg.line_points[n] * level


def level_up(level_lines: int, config: Optional[RulesConfig] = None) -> bool:
    cfg = config or DEFAULT_RULES
    return level_lines >= cfg.lines_per_level


def grav_speed(level: int, soft_drop: bool = False, config: Optional[RulesConfig] = None) -> int:
    """Milliseconds between gravity steps."""
    cfg = config or DEFAULT_RULES
    if soft_drop:
        return cfg.soft_drop_speed
    return LEVEL_SPEEDS[min(level, len(LEVEL_SPEEDS) - 1)]


class ScoringSystem:
    """
    Tracks score, level and cleared lines across a game.

    Scoring formula:
    - Clearing n rows at once awards line_points[n] * (level + 1)
    - Every lines_per_level rows cleared within a level advances the level
    """

    def __init__(self, config: Optional[RulesConfig] = None):
        self.config = config or DEFAULT_RULES
        self.score = 0
        self.level = 0
        self.level_lines = 0
        self.total_lines = 0

    def process_lock(self, rows_cleared: int) -> ScoreResult:
        """
        Update the totals after a piece locks.

        Args:
            rows_cleared: Number of rows the lock completed

        Returns:
            ScoreResult with the points earned
        """
        # Score before a possible level-up
        points = get_points(rows_cleared, self.level + 1, self.config)
        self.score += points

        level_lines = self.level_lines + rows_cleared
        leveled_up = level_up(level_lines, self.config)
        if leveled_up:
            self.level += 1
            self.level_lines = 0
        else:
            self.level_lines = level_lines
        self.total_lines += rows_cleared

        return ScoreResult(
            points=points,
            rows_cleared=rows_cleared,
            level=self.level,
            leveled_up=leveled_up
        )

    def reset(self):
        """Reset the scoring system for a new game."""
        self.score = 0
        self.level = 0
        self.level_lines = 0
        self.total_lines = 0
