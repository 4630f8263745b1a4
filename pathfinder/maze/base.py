"""
Base class for maze generators.

Generators rewrite a grid's blocked flags in place. They never block the
start or end cell and draw all randomness from a private, seedable
random.Random so a given seed always yields the same maze.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pathfinder.grid.grid import ORTHOGONAL_OFFSETS

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid

logger = logging.getLogger(__name__)


class MazeGenerator(ABC):
    """Abstract base class for maze generation strategies."""

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used by the generator registry."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    def generate(self, grid: Grid) -> None:
        """
        Generate a maze on the grid in place.

        Raises:
            PreconditionError: If the grid is missing its start or end cell
        """
        grid.require_endpoints()
        logger.debug(f"{self.name}: generating on {grid.columns}x{grid.rows} (seed={self._seed})")
        self._generate(grid)
        logger.debug(f"{self.name}: done, {grid.blocked_count()} cells blocked")

    @abstractmethod
    def _generate(self, grid: Grid) -> None:
        ...

    @staticmethod
    def _orthogonal_neighbours(grid: Grid, cell: Cell) -> list[Cell]:
        """In-bounds 4-neighbours, start and end included."""
        neighbours = []
        for d_column, d_row in ORTHOGONAL_OFFSETS:
            neighbour = grid.get_cell(cell.column + d_column, cell.row + d_row)
            if neighbour is not None:
                neighbours.append(neighbour)
        return neighbours

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, seed={self._seed!r})"
