"""Fixed-depth minimax search."""

from .minimax import DEFAULT_DEPTH, DRAW, WIN_SCORE, SearchConfig, SearchEngine, SearchResult

__all__ = ["DEFAULT_DEPTH", "DRAW", "WIN_SCORE", "SearchConfig", "SearchEngine", "SearchResult"]
