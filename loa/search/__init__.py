"""Adversarial move search."""

from .negamax import INF, NEUTRAL_VALUE, WIN_VALUE, NegamaxSearch, SearchConfig, SearchResult, applied

__all__ = [
    "INF",
    "NEUTRAL_VALUE",
    "WIN_VALUE",
    "NegamaxSearch",
    "SearchConfig",
    "SearchResult",
    "applied",
]
