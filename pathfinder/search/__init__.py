"""
Path search module.

Provides the interchangeable path search strategies:
- AStarSearch: g(n) + Manhattan h(n)
- BreadthFirstSearch: FIFO queue of paths
- DepthFirstSearch: stack of paths with backtracking
- DijkstraSearch: lowest cost-so-far first
- GreedyBestFirstSearch: heuristic only
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathfinder.exceptions import UnsupportedStrategyError
from pathfinder.search.a_star import AStarSearch
from pathfinder.search.base import Path, PathSearchStrategy, PrioritySearch
from pathfinder.search.breadth_first import BreadthFirstSearch
from pathfinder.search.depth_first import DepthFirstSearch
from pathfinder.search.dijkstra import DijkstraSearch
from pathfinder.search.greedy_best_first import GreedyBestFirstSearch
from pathfinder.search.priority_queue import PriorityQueue, QueueEntry

if TYPE_CHECKING:
    from pathfinder.grid.grid import Grid

logger = logging.getLogger(__name__)

__all__ = [
    "Path",
    "PathSearchStrategy",
    "PrioritySearch",
    "PriorityQueue",
    "QueueEntry",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraSearch",
    "GreedyBestFirstSearch",
    "SUPPORTED_PATH_ALGORITHMS",
    "get_path_strategy",
    "run_path_search",
]

# Display name -> strategy class
SUPPORTED_PATH_ALGORITHMS: dict[str, type[PathSearchStrategy]] = {
    "A Star": AStarSearch,
    "Breadth First": BreadthFirstSearch,
    "Depth First": DepthFirstSearch,
    "Dijkstras": DijkstraSearch,
    "Greedy Best-First": GreedyBestFirstSearch,
}

# Short command-line friendly names
_ALIASES = {
    "astar": "A Star",
    "a*": "A Star",
    "bfs": "Breadth First",
    "dfs": "Depth First",
    "dijkstra": "Dijkstras",
    "greedy": "Greedy Best-First",
}


def _resolve(name: str) -> str | None:
    if name in SUPPORTED_PATH_ALGORITHMS:
        return name
    lowered = name.strip().lower()
    for display_name in SUPPORTED_PATH_ALGORITHMS:
        if display_name.lower() == lowered:
            return display_name
    return _ALIASES.get(lowered)


def get_path_strategy(name: str) -> PathSearchStrategy:
    """
    Get a path search strategy by name.

    Args:
        name: Display name ("A Star", "Breadth First", "Depth First",
            "Dijkstras", "Greedy Best-First") or alias (astar, bfs, dfs,
            dijkstra, greedy), case-insensitive

    Returns:
        Instantiated strategy

    Raises:
        UnsupportedStrategyError: If the name is unknown
    """
    resolved = _resolve(name)
    if resolved is None:
        raise UnsupportedStrategyError(name, list(SUPPORTED_PATH_ALGORITHMS))
    return SUPPORTED_PATH_ALGORITHMS[resolved]()


def run_path_search(name: str, grid: Grid) -> Path:
    """
    Run the named strategy on a grid.

    Returns:
        Path from start to end inclusive, or [] if none exists
    """
    strategy = get_path_strategy(name)
    logger.info(f"Running {strategy.name} on {grid.columns}x{grid.rows} grid")
    return strategy.search(grid)
