"""
Depth-first search with explicit backtracking.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathfinder.search.base import Path, PathSearchStrategy

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid

logger = logging.getLogger(__name__)


class DepthFirstSearch(PathSearchStrategy):
    """
    Follows one direction until it hits a dead end, then backs up.

    The frontier is a single path prefix used as a stack of cells. Each step
    extends it with the first unvisited open neighbour of its last cell.
    When that cell has nowhere left to go it is dropped and the search
    continues from the cell before, so the returned path never contains
    dead-end detours. Paths are not necessarily shortest.
    """

    @property
    def name(self) -> str:
        return "Depth First"

    @property
    def description(self) -> str:
        return "Single path extended one cell at a time, backtracking at dead ends"

    def _search(self, grid: Grid, start: Cell, end: Cell) -> Path:
        path = [start]

        while path:
            adjacent = self._open_neighbours(grid, path[-1])

            if not adjacent:
                # Dead end: back up one cell and retry from there
                logger.debug(f"{self.name}: dead end at {path[-1]}, backtracking")
                path = path[:-1]
                continue

            cell = adjacent[0]
            if cell == end:
                return path + [end]

            grid.mark_visited(cell)
            path = path + [cell]

        return []
