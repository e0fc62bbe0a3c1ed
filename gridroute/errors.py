"""
Error types raised by the search engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridroute.grid.model import Cell


class GridRouteError(Exception):
    """Base class for all engine errors."""


class InvalidCellError(GridRouteError, ValueError):
    """Start or end cell is outside the grid or sits on an obstacle."""


class PathNotFoundError(GridRouteError, LookupError):
    """The goal was never reached, so no predecessor chain exists."""


class SearchBudgetExceeded(GridRouteError):
    """
    Exhaustive search ran out of its expansion or time budget.

    Distinct from "no path": the search gave up before it could tell.

    Attributes:
        expansions: Cells expanded before giving up
        elapsed_ms: Wall-clock time spent (milliseconds)
        best_path: Best path found so far, possibly not the shortest
    """

    def __init__(
        self,
        message: str,
        expansions: int,
        elapsed_ms: float,
        best_path: list[Cell] | None = None,
    ) -> None:
        super().__init__(message)
        self.expansions = expansions
        self.elapsed_ms = elapsed_ms
        self.best_path = best_path or []
