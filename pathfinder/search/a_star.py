"""
A* search with a Manhattan-distance heuristic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathfinder.search.base import Path, PrioritySearch
from pathfinder.search.priority_queue import PriorityQueue

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid


class AStarSearch(PrioritySearch):
    """
    Priority queue keyed by f(n) = g(n) + h(n).

    g(n) is the prefix length and h(n) the Manhattan distance from the
    candidate to the end, ignoring walls. Manhattan is admissible for
    4-neighbour movement only; with diagonal moves enabled it can
    overestimate and the path may not be shortest.

    Unlike the other priority searches, a cell is marked visited when its
    prefix is expanded rather than when it is first generated. A cell may
    be queued more than once, but only its cheapest prefix is expanded.
    """

    @property
    def name(self) -> str:
        return "A Star"

    @property
    def description(self) -> str:
        return "Cost so far plus Manhattan estimate, shortest path on 4-neighbour grids"

    @property
    def guarantees_shortest(self) -> bool:
        return True

    def priority(self, prefix: Path, cell: Cell, end: Cell) -> float:
        gn = len(prefix)
        hn = cell.manhattan(end)
        return gn + hn

    def _search(self, grid: Grid, start: Cell, end: Cell) -> Path:
        open_paths: PriorityQueue[Path] = PriorityQueue()
        open_paths.enqueue([start], start.manhattan(end))

        while open_paths:
            current_path = open_paths.dequeue_low().item
            current_cell = current_path[-1]

            if current_cell != start:
                if grid.is_visited(current_cell):
                    continue
                grid.mark_visited(current_cell)

            for cell in self._open_neighbours(grid, current_cell):
                if cell == end:
                    return current_path + [end]
                open_paths.enqueue(current_path + [cell], self.priority(current_path, cell, end))

        return []
