"""
Process-wide search configuration.

The traversal strategy and heuristic are chosen once at startup. Unknown
identifiers fail immediately instead of falling back to a default.
"""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

STRATEGY_ENV = "TETRIS_SEARCH_STRATEGY"
HEURISTIC_ENV = "TETRIS_HEURISTIC"


class ConfigurationError(ValueError):
    """Raised for an unrecognized search strategy or heuristic."""


class SearchStrategy(str, Enum):
    BFS = "bfs"
    DFS = "dfs"


class HeuristicType(str, Enum):
    HEIGHT = "height"
    FILL_WELLS = "fill-wells"
    CLEAR_LINES = "clear-lines"


E = TypeVar("E", bound=Enum)


def _parse(enum_cls: Type[E], value: Any, label: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        available = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"{label} {value!r} does not exist. Available: {available}"
        ) from None


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for the placement search."""
    strategy: SearchStrategy = SearchStrategy.BFS
    heuristic: HeuristicType = HeuristicType.FILL_WELLS

    def __post_init__(self):
        object.__setattr__(self, 'strategy', _parse(SearchStrategy, self.strategy, "Search strategy"))
        object.__setattr__(self, 'heuristic', _parse(HeuristicType, self.heuristic, "Heuristic type"))

    @classmethod
    def from_names(cls, strategy: str, heuristic: str) -> "SearchConfig":
        """Build a config from identifiers such as 'bfs' and 'fill-wells'."""
        return cls(strategy=strategy, heuristic=heuristic)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        """
        Build a config from TETRIS_SEARCH_STRATEGY and TETRIS_HEURISTIC.
        Unset variables use the defaults.
        """
        environ = os.environ if environ is None else environ
        return cls(
            strategy=environ.get(STRATEGY_ENV, cls.strategy.value),
            heuristic=environ.get(HEURISTIC_ENV, cls.heuristic.value),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strategy': self.strategy.value,
            'heuristic': self.heuristic.value,
        }


DEFAULT_CONFIG = SearchConfig()
