from .base import BaseAgent
from .search_agent import SearchAgent

__all__ = ["BaseAgent", "SearchAgent"]
