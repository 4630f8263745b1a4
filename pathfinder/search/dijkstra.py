"""
Dijkstra's algorithm on a uniform-cost grid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathfinder.search.base import Path, PrioritySearch

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell


class DijkstraSearch(PrioritySearch):
    """
    Priority queue keyed by cost so far, g(n) = length of the prefix.

    Always expands the cheapest known path first, so the first path to
    reach the end is a shortest one.
    """

    @property
    def name(self) -> str:
        return "Dijkstras"

    @property
    def description(self) -> str:
        return "Lowest cost-so-far first, shortest path"

    @property
    def guarantees_shortest(self) -> bool:
        return True

    def priority(self, prefix: Path, cell: Cell, end: Cell) -> float:
        return len(prefix)
