"""
Grid module.

Provides the grid model shared by the search strategies:
- Cell: Immutable (row, col) coordinate
- GridModel: Bounds and obstacle lookups, neighbour ordering
- render_grid: Plain-text drawing for the command line
"""

from gridroute.grid.model import DIRECTIONS, Cell, CellLike, GridModel, as_cell, manhattan
from gridroute.grid.render import render_grid

__all__ = [
    "Cell",
    "CellLike",
    "DIRECTIONS",
    "GridModel",
    "as_cell",
    "manhattan",
    "render_grid",
]
