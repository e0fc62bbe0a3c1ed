"""
Exhaustive depth-first search with backtracking and bound pruning.

Explores simple paths from the start, trying the neighbours closest to the
end first. Once a path to the end is known, any branch that cannot beat it
is cut off, so the best path left at the end is a shortest one.

Two lower bounds decide the cut. The breadth-first distance from each cell
to the end is computed once per call. When that is not enough, a short
breadth-first walk from the cell that avoids the current path gives the
exact number of steps still needed. Branches that are sealed off from the
end by the path itself are dropped this way too, before any solution is
known.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterable
from dataclasses import dataclass, replace

import numpy as np

from gridroute.config import DFS_MAX_EXPANSIONS, DFS_TIMEOUT_S, GRID_SIZE
from gridroute.errors import SearchBudgetExceeded
from gridroute.grid.model import Cell, CellLike, GridModel, as_cell
from gridroute.search.base import SearchBudget, SearchResult, SearchStrategy

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One level of the explicit DFS stack; owns path[depth]."""

    cell: Cell
    neighbors: tuple[Cell, ...]
    next_index: int = 0


class _ExhaustiveSearch:
    """
    State for a single exhaustive search call.

    Attributes:
        grid: Grid being searched
        end: Target cell
        budget: Limits checked on every expansion
        dist_to_end: Breadth-first distance from every cell to end
    """

    def __init__(
        self,
        grid: GridModel,
        end: Cell,
        budget: SearchBudget,
        dist_to_end: np.ndarray,
    ) -> None:
        self.grid = grid
        self.end = end
        self.budget = budget
        self.dist_to_end = dist_to_end

        size = grid.size
        self._end_index = end.row * size + end.col
        # Open neighbours of every cell as flat row * size + col indices
        self._adjacent = [
            [n.row * size + n.col for n in grid.neighbors(Cell(row, col))]
            for row in range(size)
            for col in range(size)
        ]

        self._on_path = np.zeros((size, size), dtype=bool)
        self._path: list[Cell] = []
        self._frames: list[_Frame] = []
        self._best_path: list[Cell] | None = None
        self._best_length: int | None = None

        self.expansions = 0
        self.pruned = 0

    def run(self, start: Cell) -> list[Cell]:
        """Search from start and return the best path, or [] if none."""
        self.budget.start()
        self._enter(start)

        while self._frames:
            frame = self._frames[-1]

            if frame.next_index == len(frame.neighbors):
                # All neighbours tried: backtrack
                self._frames.pop()
                cell = self._path.pop()
                self._on_path[cell.row, cell.col] = False
                continue

            neighbor = frame.neighbors[frame.next_index]
            frame.next_index += 1
            if not self._on_path[neighbor.row, neighbor.col]:
                self._enter(neighbor)

        logger.debug(f"Exhaustive search pruned {self.pruned:,} branches")
        return self._best_path or []

    def _enter(self, cell: Cell) -> None:
        """Visit cell at the current depth, opening a frame if it is worth expanding."""
        length = len(self._path)

        if cell == self.end:
            # Strict < keeps the first path found among equal lengths
            if self._best_length is None or length < self._best_length:
                self._best_path = self._path + [cell]
                self._best_length = length
                logger.debug(f"New best path of length {length}: {self._best_path}")
            return

        # Only paths strictly shorter than the best can still replace it
        if self._best_length is None:
            limit = self.grid.size * self.grid.size
        else:
            limit = self._best_length - length - 1
        if self.dist_to_end[cell.row, cell.col] > limit:
            self.pruned += 1
            return
        if self._remaining_steps(cell, limit) > limit:
            self.pruned += 1
            return

        self.expansions += 1
        self.budget.check(self.expansions, self._best_path)

        self._on_path[cell.row, cell.col] = True
        self._path.append(cell)
        self._frames.append(_Frame(cell, self.grid.ordered_neighbors(cell, self.end)))

    def _remaining_steps(self, cell: Cell, limit: int) -> float:
        """
        Steps from cell to end without reusing a cell on the current path.

        The walk stops after limit steps. Returns inf if end was not reached
        by then.
        """
        size = self.grid.size
        source = cell.row * size + cell.col
        seen = self._on_path.ravel().tolist()
        seen[source] = True

        frontier = [source]
        steps = 0
        while frontier and steps < limit:
            steps += 1
            next_frontier = []
            for index in frontier:
                for neighbor in self._adjacent[index]:
                    if neighbor == self._end_index:
                        return steps
                    if not seen[neighbor]:
                        seen[neighbor] = True
                        next_frontier.append(neighbor)
            frontier = next_frontier
        return math.inf


def find_shortest_path_exhaustive(
    start: CellLike,
    end: CellLike,
    obstacles: Iterable[CellLike] | None = None,
    grid_size: int = GRID_SIZE,
    budget: SearchBudget | None = None,
) -> SearchResult:
    """
    Find a shortest path by exhaustive backtracking search.

    Args:
        start: Start cell
        end: End cell
        obstacles: Blocked cells
        grid_size: Width and height of the grid
        budget: Limits for this call. The search runs on a copy, so one
            budget may be passed to several calls. Defaults to the
            configured DFS_MAX_EXPANSIONS and DFS_TIMEOUT_S.

    Returns:
        SearchResult with a shortest path, or an empty path if end is unreachable

    Raises:
        InvalidCellError: If start or end is out of bounds or blocked
        SearchBudgetExceeded: If the budget ran out before the search finished
    """
    start, end = as_cell(start), as_cell(end)
    grid = GridModel.build(obstacles, grid_size)
    grid.validate_endpoints(start, end)

    if budget is None:
        budget = SearchBudget(max_expansions=DFS_MAX_EXPANSIONS, timeout_s=DFS_TIMEOUT_S)
    else:
        # The caller's budget keeps its own clock state
        budget = replace(budget)

    logger.info(f"Exhaustive search {start} -> {end} ({len(grid.obstacles)} obstacles)")
    started = time.perf_counter()

    dist_to_end = grid.distance_map(end)
    if np.isinf(dist_to_end[start.row, start.col]):
        logger.info(f"Exhaustive search: no path from {start} to {end}")
        return SearchResult(
            strategy=ExhaustiveStrategy.NAME,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    search = _ExhaustiveSearch(grid, end, budget, dist_to_end)
    try:
        path = search.run(start)
    except SearchBudgetExceeded as e:
        logger.warning(f"Exhaustive search {start} -> {end}: {e} ({e.expansions:,} expansions)")
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    if path:
        logger.info(f"Exhaustive search found path of length {len(path) - 1} in {elapsed_ms:.1f}ms")
    else:
        logger.info(f"Exhaustive search: no path from {start} to {end}")

    return SearchResult(
        strategy=ExhaustiveStrategy.NAME,
        path=path,
        expansions=search.expansions,
        elapsed_ms=elapsed_ms,
    )


class ExhaustiveStrategy(SearchStrategy):
    """
    Depth-first backtracking search ("dfs").

    Each call gets a fresh SearchBudget built from the limits given here.
    """

    NAME = "dfs"

    def __init__(
        self,
        max_expansions: int | None = DFS_MAX_EXPANSIONS,
        timeout_s: float | None = DFS_TIMEOUT_S,
    ) -> None:
        """
        Initialize the strategy.

        Args:
            max_expansions: Expansion cap per search (None for no cap)
            timeout_s: Time limit per search in seconds (None for no limit)
        """
        self._max_expansions = max_expansions
        self._timeout_s = timeout_s

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def description(self) -> str:
        return "Exhaustive DFS with backtracking, Manhattan ordering and bound pruning"

    def find_path(
        self,
        start: CellLike,
        end: CellLike,
        obstacles: Iterable[CellLike] | None = None,
        grid_size: int = GRID_SIZE,
    ) -> SearchResult:
        budget = SearchBudget(max_expansions=self._max_expansions, timeout_s=self._timeout_s)
        return find_shortest_path_exhaustive(start, end, obstacles, grid_size, budget)
