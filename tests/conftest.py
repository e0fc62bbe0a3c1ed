"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import pytest

from gridroute.grid import Cell
from gridroute.search import find_shortest_path_bfs, find_shortest_path_exhaustive


@pytest.fixture
def grid_size() -> int:
    """Grid size used by the HTTP service."""
    return 20


@pytest.fixture(params=["dfs", "dijkstra"])
def search(request):
    """Each public search function, parametrised by strategy name."""
    return {
        "dfs": find_shortest_path_exhaustive,
        "dijkstra": find_shortest_path_bfs,
    }[request.param]


@pytest.fixture
def walled_start() -> tuple[Cell, set[Cell]]:
    """Start cell (5, 5) boxed in on all four sides."""
    start = Cell(5, 5)
    return start, {Cell(4, 5), Cell(6, 5), Cell(5, 4), Cell(5, 6)}


@pytest.fixture
def trap() -> dict:
    """
    7x7 grid split by a wall on column 3, open only at (0, 3) and (4, 3).

    Greedy ordering goes over the top first (12 steps); the shortest route
    goes under through (4, 3) (8 steps).
    """
    return {
        "size": 7,
        "start": Cell(3, 0),
        "end": Cell(3, 6),
        "obstacles": {Cell(1, 3), Cell(2, 3), Cell(3, 3), Cell(5, 3), Cell(6, 3)},
        "first_path": [
            Cell(3, 0), Cell(3, 1), Cell(3, 2), Cell(2, 2), Cell(1, 2), Cell(0, 2), Cell(0, 3),
            Cell(0, 4), Cell(1, 4), Cell(2, 4), Cell(3, 4), Cell(3, 5), Cell(3, 6),
        ],
        "shortest_length": 8,
    }


def assert_valid_path(path: list[Cell], start: Cell, end: Cell, obstacles, size: int) -> None:
    """Check endpoints, 4-adjacency, no repeats, bounds and obstacles."""
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for cell in path:
        assert 0 <= cell.row < size and 0 <= cell.col < size
        assert cell not in obstacles
    for a, b in zip(path, path[1:]):
        assert a.manhattan(b) == 1


@pytest.fixture
def check_path():
    """Path validity assertion helper."""
    return assert_valid_path
