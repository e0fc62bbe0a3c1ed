"""
Grid model shared by both search strategies.

A grid is implicit: its size plus a set of blocked cells. Any cell inside
the bounds that is not blocked can be walked on, moving up, down, left or
right one step at a time.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Union

import numpy as np

from gridroute.config import GRID_SIZE
from gridroute.errors import InvalidCellError


@dataclass(frozen=True)
class Cell:
    """
    A single grid cell.

    Attributes:
        row: Zero-based row index
        col: Zero-based column index
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Cell:
        return Cell(self.row + d_row, self.col + d_col)

    def manhattan(self, other: Cell) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def to_dict(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> Cell:
        return cls(int(data["row"]), int(data["col"]))

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"


CellLike = Union[Cell, tuple[int, int], Mapping[str, int]]

# Up, down, left, right. Never reordered; callers sort copies.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def as_cell(value: CellLike) -> Cell:
    """Coerce a Cell, (row, col) pair or {"row", "col"} mapping to a Cell."""
    if isinstance(value, Cell):
        return value
    if isinstance(value, Mapping):
        return Cell.from_dict(value)
    row, col = value
    return Cell(int(row), int(col))


def manhattan(a: Cell, b: Cell) -> int:
    """|delta row| + |delta col| between two cells."""
    return a.manhattan(b)


@dataclass(frozen=True)
class GridModel:
    """
    Bounds and obstacle lookups for a square grid.

    Attributes:
        size: Number of rows (and columns)
        obstacles: Blocked cells
    """

    size: int = GRID_SIZE
    obstacles: frozenset[Cell] = field(default_factory=frozenset)

    @classmethod
    def build(cls, obstacles: Iterable[CellLike] | None = None, size: int = GRID_SIZE) -> GridModel:
        """Create a grid from any iterable of cell-like obstacle values."""
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        return cls(size=size, obstacles=frozenset(as_cell(o) for o in obstacles or ()))

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.size and 0 <= cell.col < self.size

    def is_obstacle(self, cell: Cell) -> bool:
        return cell in self.obstacles

    def is_open(self, cell: Cell) -> bool:
        """Whether a path may pass through this cell."""
        return self.in_bounds(cell) and cell not in self.obstacles

    def neighbors(self, cell: Cell) -> tuple[Cell, ...]:
        """Open 4-directional neighbours, in up/down/left/right order."""
        candidates = (cell.offset(d_row, d_col) for d_row, d_col in DIRECTIONS)
        return tuple(n for n in candidates if self.is_open(n))

    def ordered_neighbors(self, cell: Cell, goal: Cell) -> tuple[Cell, ...]:
        """
        Open neighbours sorted by ascending Manhattan distance to goal.

        The sort is stable, so equally distant neighbours keep the
        up/down/left/right order. A new tuple is built on every call.
        """
        return tuple(sorted(self.neighbors(cell), key=goal.manhattan))

    def distance_map(self, source: Cell) -> np.ndarray:
        """
        Step counts from source to every cell (breadth-first).

        Returns:
            size x size float array; inf for blocked or unreachable cells
        """
        distance = np.full((self.size, self.size), np.inf)
        if not self.is_open(source):
            return distance

        distance[source.row, source.col] = 0
        frontier = deque([source])
        while frontier:
            cell = frontier.popleft()
            steps = distance[cell.row, cell.col] + 1
            for neighbor in self.neighbors(cell):
                if np.isinf(distance[neighbor.row, neighbor.col]):
                    distance[neighbor.row, neighbor.col] = steps
                    frontier.append(neighbor)
        return distance

    def connected(self, a: Cell, b: Cell) -> bool:
        """Whether b can be reached from a at all."""
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return False
        return bool(np.isfinite(self.distance_map(a)[b.row, b.col]))

    def validate_endpoints(self, start: Cell, end: Cell) -> None:
        """
        Reject endpoints a search could not start from or finish on.

        Raises:
            InvalidCellError: If either cell is out of bounds or blocked
        """
        for label, cell in (("start", start), ("end", end)):
            if not self.in_bounds(cell):
                raise InvalidCellError(
                    f"{label} cell {cell} is outside the {self.size}x{self.size} grid"
                )
            if self.is_obstacle(cell):
                raise InvalidCellError(f"{label} cell {cell} is an obstacle")
