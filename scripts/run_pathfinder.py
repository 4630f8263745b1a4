#!/usr/bin/env python3
"""
Pathfinder CLI - Run a path search (optionally on a generated maze) and
print the grid as text.

Usage:
    python scripts/run_pathfinder.py --algorithm "A Star"
    python scripts/run_pathfinder.py --algorithm bfs --maze division --seed 7
    python scripts/run_pathfinder.py --algorithm dfs --maze backtracking --size medium
    python scripts/run_pathfinder.py --algorithm greedy --columns 21 --rows 11 --diagonal

Algorithms:
    "A Star"            - g(n) + Manhattan h(n)       (alias: astar)
    "Breadth First"     - FIFO queue of paths          (alias: bfs)
    "Depth First"       - stack with backtracking      (alias: dfs)
    "Dijkstras"         - lowest cost so far           (alias: dijkstra)
    "Greedy Best-First" - heuristic only               (alias: greedy)

Mazes:
    "Recursive Backtracking" (alias: backtracking)
    "Recursive Division"     (alias: division)

Legend:
    S start   E end   # wall   * path   . checked
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder.config import (  # noqa: E402
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SIZE_PRESETS,
    SPEED_LEVELS,
)
from pathfinder.exceptions import PathfinderError  # noqa: E402
from pathfinder.session import PathfinderSession  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid pathfinding algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        type=str,
        default="A Star",
        help="Path search algorithm name or alias (default: A Star)",
    )
    parser.add_argument(
        "--maze",
        type=str,
        default=None,
        help="Generate a maze first with this generator",
    )
    parser.add_argument(
        "--size",
        type=str,
        default="small",
        choices=list(SIZE_PRESETS),
        help="Grid size preset (default: small)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Override the preset column count",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=None,
        help="Override the preset row count",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for maze generation",
    )
    parser.add_argument(
        "--speed",
        type=str,
        default="Ludicrous",
        choices=list(SPEED_LEVELS),
        help="Pacing between steps (default: Ludicrous)",
    )
    parser.add_argument(
        "--diagonal",
        action="store_true",
        help="Allow diagonal moves (8 neighbours)",
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

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    columns, rows = SIZE_PRESETS[args.size]
    if args.columns is not None:
        columns = args.columns
    if args.rows is not None:
        rows = args.rows

    try:
        session = PathfinderSession(
            columns=columns,
            rows=rows,
            speed=args.speed,
            allow_diagonal=args.diagonal,
        )
        if args.maze:
            maze = session.generate_maze(args.maze, seed=args.seed)
            print(f"Maze: {maze.algorithm} ({maze.blocked_cells} walls, {maze.elapsed_ms:.0f}ms)")

        result = session.find_path(args.algorithm)
    except PathfinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n\nRun interrupted by user")
        return 130

    print("\n" + "=" * (columns + 2))
    for line in session.grid.to_text().splitlines():
        print(f"|{line}|")
    print("=" * (columns + 2))

    print(f"\nAlgorithm:     {result.algorithm}")
    print(f"Cells checked: {result.cells_checked}")
    if result.found:
        print(f"Path length:   {result.solution_length} cells")
    else:
        print("Path length:   no path found")
    print(f"Time:          {result.elapsed_ms:.0f}ms")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
