"""
Search module.

Provides the two interchangeable path search strategies:
- ExhaustiveStrategy ("dfs"): Backtracking DFS with bound pruning
- BreadthFirstStrategy ("dijkstra"): Unit-weight Dijkstra, i.e. BFS
"""

from gridroute.search.base import SearchBudget, SearchResult, SearchStrategy
from gridroute.search.bfs import BreadthFirstStrategy, find_shortest_path_bfs
from gridroute.search.exhaustive import ExhaustiveStrategy, find_shortest_path_exhaustive

__all__ = [
    "SearchStrategy",
    "SearchResult",
    "SearchBudget",
    "ExhaustiveStrategy",
    "BreadthFirstStrategy",
    "find_shortest_path_exhaustive",
    "find_shortest_path_bfs",
    "get_strategy",
    "available_strategies",
]

_STRATEGIES = {
    "dfs": ExhaustiveStrategy,
    "exhaustive": ExhaustiveStrategy,
    "dijkstra": BreadthFirstStrategy,
    "bfs": BreadthFirstStrategy,
}


def available_strategies() -> list[str]:
    """Names accepted by get_strategy()."""
    return list(_STRATEGIES)


def get_strategy(name: str, **kwargs) -> SearchStrategy:
    """
    Get a search strategy by name.

    Args:
        name: Strategy identifier (dfs, exhaustive, dijkstra, bfs)
        **kwargs: Passed to the strategy constructor (e.g., max_expansions)

    Returns:
        Instantiated strategy

    Raises:
        ValueError: If strategy name is unknown
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")

    # Only the exhaustive search takes limits
    if _STRATEGIES[name] is ExhaustiveStrategy:
        return ExhaustiveStrategy(**kwargs)

    return _STRATEGIES[name]()
