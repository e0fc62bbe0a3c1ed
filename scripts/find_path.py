#!/usr/bin/env python3
"""
Grid Route Finder CLI - run a search locally and draw the result.

Usage:
    python scripts/find_path.py --start 0,0 --end 0,3
    python scripts/find_path.py --start 0,0 --end 0,3 --obstacle 0,1 --obstacle 0,2
    python scripts/find_path.py --start 0,0 --end 19,19 --strategy both --size 20
    python scripts/find_path.py --start 0,0 --end 19,19 --strategy dfs --max-expansions 10000

Strategies:
    dfs       - Exhaustive backtracking search with bound pruning
    dijkstra  - Unit-weight Dijkstra (breadth-first search)
    both      - Run both and compare lengths
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridroute.config import DFS_MAX_EXPANSIONS, DFS_TIMEOUT_S, GRID_SIZE, LOG_LEVEL  # noqa: E402
from gridroute.errors import InvalidCellError, SearchBudgetExceeded  # noqa: E402
from gridroute.grid import Cell, GridModel, render_grid  # noqa: E402
from gridroute.search import get_strategy  # noqa: E402


def parse_cell(text: str) -> Cell:
    """Parse "row,col" into a Cell."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL but got '{text}'") from None
    return Cell(row, col)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a shortest path on an obstacle grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--start", type=parse_cell, required=True, help="Start cell as ROW,COL")
    parser.add_argument("--end", type=parse_cell, required=True, help="End cell as ROW,COL")
    parser.add_argument(
        "--obstacle",
        type=parse_cell,
        action="append",
        default=[],
        help="Blocked cell as ROW,COL (repeatable)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default="both",
        choices=["dfs", "dijkstra", "both"],
        help="Search strategy (default: both)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=GRID_SIZE,
        help=f"Grid width and height (default: {GRID_SIZE})",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=DFS_MAX_EXPANSIONS,
        help=f"Expansion cap for dfs (default: {DFS_MAX_EXPANSIONS:,})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DFS_TIMEOUT_S,
        help=f"Time limit for dfs in seconds (default: {DFS_TIMEOUT_S})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    names = ["dfs", "dijkstra"] if args.strategy == "both" else [args.strategy]
    grid = GridModel.build(args.obstacle, args.size)
    exit_code = 0

    for name in names:
        kwargs = {"max_expansions": args.max_expansions, "timeout_s": args.timeout} if name == "dfs" else {}
        strategy = get_strategy(name, **kwargs)

        print("\n" + "=" * 60)
        print(f"  Strategy: {strategy.name} - {strategy.description}")
        print(f"  {args.start} -> {args.end} on {args.size}x{args.size} grid, {len(grid.obstacles)} obstacles")
        print("=" * 60)

        try:
            result = strategy.find_path(args.start, args.end, grid.obstacles, args.size)
        except InvalidCellError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        except SearchBudgetExceeded as e:
            print(f"Gave up: {e} after {e.expansions:,} expansions ({e.elapsed_ms:.0f}ms)")
            exit_code = 1
            continue

        print(render_grid(grid, args.start, args.end, result.path))
        if result.found:
            print(f"\nPath length: {result.length}")
        else:
            print("\nNo path exists")
            exit_code = 1
        print(f"Expansions: {result.expansions:,}  Time: {result.elapsed_ms:.1f}ms")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
