"""
Grid Route Finder.

Shortest-path search between two cells of a bounded grid with blocked
cells, using exhaustive backtracking or breadth-first search.
"""

__version__ = "0.1.0"
