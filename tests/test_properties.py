"""
Properties both strategies must share, checked on fixed scenarios and on
random obstacle layouts.
"""

import numpy as np
import pytest

from gridroute.grid import Cell
from gridroute.search import find_shortest_path_bfs, find_shortest_path_exhaustive


def random_layout(seed: int, size: int, density: float) -> tuple[Cell, Cell, set[Cell]]:
    """Random open start/end and a random obstacle set (seeded)."""
    rng = np.random.default_rng(seed)
    blocked = rng.random((size, size)) < density
    start = Cell(int(rng.integers(size)), int(rng.integers(size)))
    end = Cell(int(rng.integers(size)), int(rng.integers(size)))
    blocked[start.row, start.col] = False
    blocked[end.row, end.col] = False
    obstacles = {Cell(int(r), int(c)) for r, c in zip(*np.nonzero(blocked))}
    return start, end, obstacles


class TestScenarios:
    """Concrete scenarios, run against both strategies."""

    def test_open_row(self, search, grid_size):
        """(0,0) -> (0,3) with no obstacles walks straight along row 0."""
        result = search((0, 0), (0, 3), [], grid_size)
        assert result.path == [Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(0, 3)]

    def test_blocked_pair_detour(self, search, grid_size, check_path):
        """Blocking (0,1) and (0,2) forces a 5-step detour through row 1."""
        obstacles = {Cell(0, 1), Cell(0, 2)}
        result = search((0, 0), (0, 3), obstacles, grid_size)
        assert result.length == 5
        assert all(cell.row in (0, 1) for cell in result.path)
        check_path(result.path, Cell(0, 0), Cell(0, 3), obstacles, grid_size)

    def test_start_enclosed(self, search, walled_start, grid_size):
        """A start boxed in on four sides has no path."""
        start, walls = walled_start
        assert search(start, (15, 15), walls, grid_size).path == []

    def test_goal_enclosed(self, search, grid_size):
        """A goal boxed in on four sides has no path, never a partial one."""
        walls = {Cell(9, 10), Cell(11, 10), Cell(10, 9), Cell(10, 11)}
        assert search((0, 0), (10, 10), walls, grid_size).path == []

    def test_start_is_end(self, search, grid_size):
        """start == end gives [start]."""
        assert search((5, 5), (5, 5), [], grid_size).path == [Cell(5, 5)]


class TestObstacleFree:
    """On an empty grid every shortest path has Manhattan length."""

    @pytest.mark.parametrize(
        "start,end",
        [((0, 0), (19, 19)), ((19, 0), (0, 19)), ((7, 3), (2, 11)), ((10, 10), (10, 0))],
    )
    def test_length_is_manhattan(self, search, grid_size, check_path, start, end):
        result = search(start, end, [], grid_size)
        start, end = Cell(*start), Cell(*end)
        assert result.length == start.manhattan(end)
        check_path(result.path, start, end, set(), grid_size)


class TestRandomLayouts:
    """Both strategies agree on random grids."""

    @pytest.mark.parametrize("seed", range(40))
    def test_strategies_agree(self, seed, check_path):
        """Same length (or both not found), and both paths are valid."""
        size = 6
        start, end, obstacles = random_layout(seed, size, density=0.3)

        exhaustive = find_shortest_path_exhaustive(start, end, obstacles, size)
        bfs = find_shortest_path_bfs(start, end, obstacles, size)

        assert exhaustive.found == bfs.found
        assert exhaustive.length == bfs.length
        for result in (exhaustive, bfs):
            if result.found:
                check_path(result.path, start, end, obstacles, size)


class TestFullSizeLayouts:
    """Exhaustive search finishes on 20x20 layouts under the default budget."""

    @pytest.mark.parametrize("density", [0.1, 0.2, 0.3])
    @pytest.mark.parametrize("seed", range(10))
    def test_within_default_budget(self, seed, density, grid_size, check_path):
        """No SearchBudgetExceeded, and the length matches breadth-first search."""
        start, end, obstacles = random_layout(1000 + seed, grid_size, density)

        exhaustive = find_shortest_path_exhaustive(start, end, obstacles, grid_size)
        bfs = find_shortest_path_bfs(start, end, obstacles, grid_size)

        assert exhaustive.length == bfs.length
        if exhaustive.found:
            check_path(exhaustive.path, start, end, obstacles, grid_size)
