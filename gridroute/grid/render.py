"""
Plain-text drawing of a grid and a path, for the command line.
"""

from __future__ import annotations

from gridroute.grid.model import Cell, GridModel

START = "S"
END = "E"
OBSTACLE = "#"
PATH = "*"
EMPTY = "."


def render_grid(grid: GridModel, start: Cell, end: Cell, path: list[Cell] | None = None) -> str:
    """
    Draw the grid one row per line.

    S and E mark the endpoints, # obstacles, * the path between them.
    """
    on_path = set(path or ())
    lines = []
    for row in range(grid.size):
        chars = []
        for col in range(grid.size):
            cell = Cell(row, col)
            if cell == start:
                chars.append(START)
            elif cell == end:
                chars.append(END)
            elif grid.is_obstacle(cell):
                chars.append(OBSTACLE)
            elif cell in on_path:
                chars.append(PATH)
            else:
                chars.append(EMPTY)
        lines.append(" ".join(chars))
    return "\n".join(lines)
