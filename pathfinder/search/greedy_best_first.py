"""
Greedy best-first search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathfinder.search.base import Path, PrioritySearch

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell


class GreedyBestFirstSearch(PrioritySearch):
    """
    Priority queue keyed by the heuristic alone.

    Heads straight for the end using Manhattan distance and ignores the
    cost already paid, trading optimality for fewer cells checked.
    """

    @property
    def name(self) -> str:
        return "Greedy Best-First"

    @property
    def description(self) -> str:
        return "Closest-to-end estimate first, fast but not always shortest"

    def priority(self, prefix: Path, cell: Cell, end: Cell) -> float:
        return cell.manhattan(end)
