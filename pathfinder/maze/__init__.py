"""
Maze generation module.

Provides maze generators that rewrite a grid's walls in place:
- RecursiveBacktracking: randomized depth-first carving on a 2-cell lattice
- RecursiveDivision: recursive bisection with single-gap walls
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathfinder.exceptions import UnsupportedStrategyError
from pathfinder.maze.base import MazeGenerator
from pathfinder.maze.recursive_backtracking import RecursiveBacktracking
from pathfinder.maze.recursive_division import RecursiveDivision

if TYPE_CHECKING:
    from pathfinder.grid.grid import Grid

logger = logging.getLogger(__name__)

__all__ = [
    "MazeGenerator",
    "RecursiveBacktracking",
    "RecursiveDivision",
    "SUPPORTED_MAZE_ALGORITHMS",
    "get_maze_generator",
    "run_maze_generation",
]

# Display name -> generator class
SUPPORTED_MAZE_ALGORITHMS: dict[str, type[MazeGenerator]] = {
    "Recursive Backtracking": RecursiveBacktracking,
    "Recursive Division": RecursiveDivision,
}

_ALIASES = {
    "backtracking": "Recursive Backtracking",
    "division": "Recursive Division",
}


def get_maze_generator(name: str, **kwargs) -> MazeGenerator:
    """
    Get a maze generator by name.

    Args:
        name: "Recursive Backtracking" or "Recursive Division" (or the aliases
            backtracking / division), case-insensitive
        **kwargs: Passed to the generator constructor (e.g., seed)

    Returns:
        Instantiated generator

    Raises:
        UnsupportedStrategyError: If the name is unknown
    """
    lowered = name.strip().lower()
    resolved = _ALIASES.get(lowered)
    for display_name in SUPPORTED_MAZE_ALGORITHMS:
        if display_name.lower() == lowered:
            resolved = display_name

    if resolved is None:
        raise UnsupportedStrategyError(name, list(SUPPORTED_MAZE_ALGORITHMS))
    return SUPPORTED_MAZE_ALGORITHMS[resolved](**kwargs)


def run_maze_generation(name: str, grid: Grid, **kwargs) -> None:
    """Generate a maze on the grid in place with the named generator."""
    generator = get_maze_generator(name, **kwargs)
    logger.info(f"Generating {generator.name} maze on {grid.columns}x{grid.rows} grid")
    generator.generate(grid)
