"""
Breadth-first search over path prefixes.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from pathfinder.search.base import Path, PathSearchStrategy

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid


class BreadthFirstSearch(PathSearchStrategy):
    """
    FIFO frontier: prefixes are expanded in order of length.

    Finds a path with the fewest cells when every move costs the same.
    """

    @property
    def name(self) -> str:
        return "Breadth First"

    @property
    def description(self) -> str:
        return "FIFO queue of paths, shortest path by cell count"

    @property
    def guarantees_shortest(self) -> bool:
        return True

    def _search(self, grid: Grid, start: Cell, end: Cell) -> Path:
        queue = deque([[start]])

        while queue:
            last_path = queue.popleft()
            last_cell = last_path[-1]

            for cell in self._open_neighbours(grid, last_cell):
                if cell == end:
                    return last_path + [end]

                grid.mark_visited(cell)
                queue.append(last_path + [cell])

        return []
