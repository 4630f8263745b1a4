"""
Recursive backtracking maze generator.

Carves corridors one cell wide by jumping two cells at a time over a
fully blocked grid, knocking out the wall cell between each jump.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathfinder.config import MAZE_CARVE_PAUSE_MS
from pathfinder.maze.base import MazeGenerator

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid

logger = logging.getLogger(__name__)

# Two-cell jumps as (d_column, d_row)
LATTICE_JUMPS = [(2, 0), (-2, 0), (0, 2), (0, -2)]


class RecursiveBacktracking(MazeGenerator):
    """
    Randomized depth-first carve over the lattice of cells that share the
    start cell's column and row parity.

    1. Block every cell except start and end.
    2. From the last cell of the carve path, try the lattice jumps in random
       order; take the first target that is still blocked (or is the end
       cell, not yet reached) and is not the start.
    3. Open the target and the wall cell between, extend the path.
    4. With no legal jump, drop the dead cell and continue from the one
       before it. Stop once the path is empty.

    Every lattice cell ends up carved and connected to the start. When the
    end cell is also on the lattice the result is a perfect maze, with
    exactly one simple path between any two open cells.
    """

    def __init__(self, seed: int | None = None, pause_ms: float = MAZE_CARVE_PAUSE_MS) -> None:
        super().__init__(seed)
        self._pause_ms = pause_ms

    @property
    def name(self) -> str:
        return "Recursive Backtracking"

    @property
    def description(self) -> str:
        return "Randomized depth-first carving on a 2-cell lattice"

    def _generate(self, grid: Grid) -> None:
        grid.fill_all_blocked()

        path = [grid.start]
        end_reached = False

        while path:
            jump = self._choose_jump(grid, path[-1], end_reached)
            if jump is None:
                path.pop()
                continue

            target, wall = jump
            if target == grid.end:
                end_reached = True
            grid.unblock(target, wall)
            path.append(target)
            grid.wait(self._pause_ms)

        self._link_end(grid)

    def _choose_jump(self, grid: Grid, current: Cell, end_reached: bool) -> tuple[Cell, Cell] | None:
        """Pick a random legal (target, wall) jump from `current`, or None."""
        directions = list(LATTICE_JUMPS)
        self._rng.shuffle(directions)

        for d_column, d_row in directions:
            target = grid.get_cell(current.column + d_column, current.row + d_row)
            if target is None or target == grid.start:
                continue
            if target == grid.end:
                if end_reached:
                    continue
            elif not grid.is_blocked(target):
                continue
            wall = grid.get_cell(current.column + d_column // 2, current.row + d_row // 2)
            return target, wall

        return None

    def _link_end(self, grid: Grid) -> None:
        """
        Connect an end cell that sits off the lattice.

        An end cell with odd offsets from the start in both directions is
        surrounded only by wall cells; open one that touches a carved cell.
        """
        end = grid.end
        neighbours = self._orthogonal_neighbours(grid, end)
        if any(not grid.is_blocked(cell) for cell in neighbours):
            return

        for wall in neighbours:
            if any(
                cell != end and not grid.is_blocked(cell)
                for cell in self._orthogonal_neighbours(grid, wall)
            ):
                grid.unblock(wall)
                logger.debug(f"{self.name}: opened {wall} to reach end {end}")
                return

        logger.warning(f"{self.name}: end {end} could not be linked to the maze")
