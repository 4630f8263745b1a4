"""
Base classes for path search strategies.

Every strategy explores a grid from its start cell, marking each cell it
examines as visited, and returns the path it found to the end cell.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pathfinder.search.priority_queue import PriorityQueue

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid

logger = logging.getLogger(__name__)

# Ordered cells from start to end inclusive; empty when no path exists
Path = list["Cell"]


class PathSearchStrategy(ABC):
    """
    Abstract base class for grid path searches.

    Frontier entries are whole path prefixes starting at the grid's start
    cell. Neighbours are tested against the end cell as they are generated,
    so the end cell itself is never marked visited.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used by the strategy registry (e.g., 'A Star')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the frontier discipline."""
        ...

    @property
    def guarantees_shortest(self) -> bool:
        """Whether the strategy returns a shortest path under uniform step cost."""
        return False

    def search(self, grid: Grid) -> Path:
        """
        Search the grid for a path from start to end.

        Args:
            grid: Grid with start and end set. Visited markers and the
                cells-checked count are reset before the run starts.

        Returns:
            Cells from start to end inclusive, or [] if the end is unreachable

        Raises:
            PreconditionError: If the grid is missing its start or end cell
        """
        start, end = grid.require_endpoints()
        grid.clear_visited()
        logger.debug(f"{self.name}: searching {start} -> {end}")

        path = self._search(grid, start, end)

        if path:
            logger.debug(f"{self.name}: found path of {len(path)} cells")
        else:
            logger.debug(f"{self.name}: no path after {grid.cells_checked} cells checked")
        return path

    @abstractmethod
    def _search(self, grid: Grid, start: Cell, end: Cell) -> Path:
        """Strategy-specific search loop."""
        ...

    def _open_neighbours(self, grid: Grid, cell: Cell) -> list[Cell]:
        """Unblocked neighbours not yet visited in this run."""
        return grid.adjacent_cells(cell, ignore_blocked=True, ignore_visited=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class PrioritySearch(PathSearchStrategy):
    """
    Best-first search over path prefixes held in a PriorityQueue.

    Subclasses define the priority of a candidate extension; the
    lowest-priority prefix is always expanded next, with FIFO tie-breaking.
    """

    @abstractmethod
    def priority(self, prefix: Path, cell: Cell, end: Cell) -> float:
        """
        Priority of extending `prefix` with `cell`.

        Args:
            prefix: Path being expanded (ends at the parent of `cell`)
            cell: Candidate neighbour
            end: The grid's end cell
        """
        ...

    def _search(self, grid: Grid, start: Cell, end: Cell) -> Path:
        open_paths: PriorityQueue[Path] = PriorityQueue()
        open_paths.enqueue([start], 0)

        while open_paths:
            current_path = open_paths.dequeue_low().item
            current_cell = current_path[-1]

            for cell in self._open_neighbours(grid, current_cell):
                if cell == end:
                    return current_path + [end]

                grid.mark_visited(cell)
                open_paths.enqueue(current_path + [cell], self.priority(current_path, cell, end))

        return []
