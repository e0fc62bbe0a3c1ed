"""
Breadth-first shortest path search ("dijkstra").

Every move costs 1, so Dijkstra's algorithm expands cells in exactly the
order a FIFO queue does. The first time the goal is popped it has been
reached by a shortest path.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Iterable

import numpy as np

from gridroute.config import GRID_SIZE
from gridroute.errors import PathNotFoundError
from gridroute.grid.model import Cell, CellLike, GridModel, as_cell
from gridroute.search.base import SearchResult, SearchStrategy

logger = logging.getLogger(__name__)


def reconstruct_path(came_from: dict[Cell, Cell], start: Cell, goal: Cell) -> list[Cell]:
    """
    Walk predecessors back from goal to start.

    Raises:
        PathNotFoundError: If the chain breaks before reaching start
    """
    path = [goal]
    current = goal
    while current != start:
        if current not in came_from:
            raise PathNotFoundError(f"No route from {start} to {goal}")
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def find_shortest_path_bfs(
    start: CellLike,
    end: CellLike,
    obstacles: Iterable[CellLike] | None = None,
    grid_size: int = GRID_SIZE,
) -> SearchResult:
    """
    Find a shortest path by breadth-first search.

    Args:
        start: Start cell
        end: End cell
        obstacles: Blocked cells
        grid_size: Width and height of the grid

    Returns:
        SearchResult with a shortest path, or an empty path if end is unreachable

    Raises:
        InvalidCellError: If start or end is out of bounds or blocked
    """
    start, end = as_cell(start), as_cell(end)
    grid = GridModel.build(obstacles, grid_size)
    grid.validate_endpoints(start, end)

    logger.info(f"BFS {start} -> {end} ({len(grid.obstacles)} obstacles)")
    started = time.perf_counter()

    distance = np.full((grid.size, grid.size), np.inf)
    distance[start.row, start.col] = 0
    came_from: dict[Cell, Cell] = {}
    queue = deque([start])
    expansions = 0

    while queue:
        current = queue.popleft()
        if current == end:
            break
        expansions += 1

        next_distance = distance[current.row, current.col] + 1
        for neighbor in grid.neighbors(current):
            if np.isinf(distance[neighbor.row, neighbor.col]):
                distance[neighbor.row, neighbor.col] = next_distance
                # Cells are immutable, so the stored predecessor can't change later
                came_from[neighbor] = current
                queue.append(neighbor)

    try:
        path = reconstruct_path(came_from, start, end)
    except PathNotFoundError:
        logger.info(f"BFS: no path from {start} to {end} ({expansions} cells reachable)")
        path = []
    else:
        logger.info(f"BFS found path of length {len(path) - 1} after {expansions} expansions")

    return SearchResult(
        strategy=BreadthFirstStrategy.NAME,
        path=path,
        expansions=expansions,
        elapsed_ms=(time.perf_counter() - started) * 1000,
    )


class BreadthFirstStrategy(SearchStrategy):
    """Breadth-first search, i.e. Dijkstra with unit edge weights ("dijkstra")."""

    NAME = "dijkstra"

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def description(self) -> str:
        return "Dijkstra with unit weights (breadth-first search)"

    def find_path(
        self,
        start: CellLike,
        end: CellLike,
        obstacles: Iterable[CellLike] | None = None,
        grid_size: int = GRID_SIZE,
    ) -> SearchResult:
        return find_shortest_path_bfs(start, end, obstacles, grid_size)
