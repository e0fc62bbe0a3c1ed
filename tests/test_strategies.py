"""
Tests for the strategy registry.
"""

import pytest

from gridroute.search import (
    BreadthFirstStrategy,
    ExhaustiveStrategy,
    SearchStrategy,
    available_strategies,
    get_strategy,
)


class TestGetStrategy:
    """Test lookup by name."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("dfs", ExhaustiveStrategy),
            ("exhaustive", ExhaustiveStrategy),
            ("dijkstra", BreadthFirstStrategy),
            ("bfs", BreadthFirstStrategy),
        ],
    )
    def test_known_names(self, name, cls):
        strategy = get_strategy(name)
        assert isinstance(strategy, cls)
        assert isinstance(strategy, SearchStrategy)

    def test_unknown_name(self):
        """Unknown names list the available ones."""
        with pytest.raises(ValueError, match="Available: dfs"):
            get_strategy("astar")

    def test_kwargs_reach_exhaustive(self):
        """Limits are passed to the exhaustive strategy."""
        strategy = get_strategy("dfs", max_expansions=10, timeout_s=None)
        assert strategy._max_expansions == 10
        assert strategy._timeout_s is None

    def test_available(self):
        assert set(available_strategies()) == {"dfs", "exhaustive", "dijkstra", "bfs"}

    def test_repr(self):
        assert repr(get_strategy("bfs")) == "BreadthFirstStrategy(name='dijkstra')"
