"""
Grid model shared by the search and maze engines.

The grid owns every cell flag as a dense numpy array indexed [row, column].
Algorithms work with lightweight Cell handles and read or write flags
through the grid, so there is a single authoritative copy of the state.

Usage:
    grid = Grid(5, 5, start=Cell(0, 2), end=Cell(4, 2))
    grid.set_blocked(Cell(2, 2), True)
    grid.adjacent_cells(grid.start, ignore_blocked=True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from pathfinder.config import ALLOW_DIAGONAL_SEARCH, WALL_PAUSE_MS
from pathfinder.exceptions import PreconditionError
from pathfinder.grid.observer import StepObserver

logger = logging.getLogger(__name__)

# Neighbour offsets as (d_column, d_row): right, down, left, up
ORTHOGONAL_OFFSETS = [(1, 0), (0, 1), (-1, 0), (0, -1)]

# Extra offsets in diagonal mode: left/down, left/up, right/down, right/up
DIAGONAL_OFFSETS = [(-1, 1), (-1, -1), (1, 1), (1, -1)]


@dataclass(frozen=True)
class Cell:
    """
    Index handle for one grid position.

    Attributes:
        column: 0-indexed column (x)
        row: 0-indexed row (y)
    """

    column: int
    row: int

    def manhattan(self, other: Cell) -> int:
        """Manhattan distance to another cell."""
        return abs(self.row - other.row) + abs(self.column - other.column)

    def __repr__(self) -> str:
        return f"Cell({self.column}, {self.row})"


class Grid:
    """
    Rectangular grid of cells with start/end markers and per-cell flags.

    Flags:
        blocked: impassable wall
        visited: examined during the current search run
        in_path: part of the most recently found path

    Implements the adapter the engines drive: cell lookup, neighbour
    enumeration, visit marking, wall placement and pacing waits.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        start: Cell | None = None,
        end: Cell | None = None,
        allow_diagonal: bool = ALLOW_DIAGONAL_SEARCH,
        observer: StepObserver | None = None,
    ) -> None:
        """
        Create a grid with no blocked cells.

        Args:
            columns: Number of columns (>= 1)
            rows: Number of rows (>= 1)
            start: Start cell; defaults to the standard layout when both
                start and end are omitted
            end: End cell
            allow_diagonal: Use 8-neighbour adjacency
            observer: Step observer used for pacing (no-op by default)

        Raises:
            PreconditionError: On bad dimensions or start/end positions
        """
        self.allow_diagonal = allow_diagonal
        self.observer = observer or StepObserver()
        self.cells_checked = 0
        self._allocate(columns, rows)

        self._start: Cell | None = None
        self._end: Cell | None = None
        if start is None and end is None:
            self._set_initial_start_end()
        else:
            if start is not None:
                self.move_start(start)
            if end is not None:
                self.move_end(end)

    def _allocate(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise PreconditionError(f"Grid must be at least 1x1, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self._blocked = np.zeros((rows, columns), dtype=bool)
        self._visited = np.zeros((rows, columns), dtype=bool)
        self._in_path = np.zeros((rows, columns), dtype=bool)

    def _set_initial_start_end(self) -> None:
        """Place start and end in the middle row, a quarter in from each side."""
        row = self.rows // 2
        start = Cell(self.columns // 4, row)
        end = Cell(min(self.columns - self.columns // 4, self.columns - 1), row)

        self._start = start
        if end == start:
            logger.warning(
                f"Grid {self.columns}x{self.rows} is too small for separate start/end; "
                f"end left unset"
            )
            self._end = None
        else:
            self._end = end

    # =========================================================================
    # Start / End
    # =========================================================================

    @property
    def start(self) -> Cell | None:
        return self._start

    @property
    def end(self) -> Cell | None:
        return self._end

    def move_start(self, cell: Cell) -> None:
        """Move the start marker. The target must be open and not the end."""
        self._require_in_bounds(cell)
        if cell == self._end:
            raise PreconditionError(f"Start cannot be placed on the end cell {cell}")
        if self.is_blocked(cell):
            raise PreconditionError(f"Start cannot be placed on blocked cell {cell}")
        self._start = cell

    def move_end(self, cell: Cell) -> None:
        """Move the end marker. The target must be open and not the start."""
        self._require_in_bounds(cell)
        if cell == self._start:
            raise PreconditionError(f"End cannot be placed on the start cell {cell}")
        if self.is_blocked(cell):
            raise PreconditionError(f"End cannot be placed on blocked cell {cell}")
        self._end = cell

    def is_start(self, cell: Cell) -> bool:
        return cell == self._start

    def is_end(self, cell: Cell) -> bool:
        return cell == self._end

    def require_endpoints(self) -> tuple[Cell, Cell]:
        """Return (start, end), failing fast when either is missing."""
        if self._start is None or self._end is None:
            raise PreconditionError("Grid must have both a start and an end cell")
        return self._start, self._end

    # =========================================================================
    # Lookup
    # =========================================================================

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.columns and 0 <= row < self.rows

    def get_cell(self, column: int, row: int) -> Cell | None:
        """Get the cell at (column, row), or None if out of bounds."""
        if not self.in_bounds(column, row):
            return None
        return Cell(column, row)

    def get_cells(self, positions: Iterable[tuple[int, int]]) -> list[Cell]:
        """
        Resolve (column, row) positions to cells.

        Raises:
            PreconditionError: If any position lies outside the grid
        """
        cells = []
        for column, row in positions:
            cell = self.get_cell(column, row)
            if cell is None:
                raise PreconditionError(
                    f"Position ({column}, {row}) is outside the {self.columns}x{self.rows} grid"
                )
            cells.append(cell)
        return cells

    def all_cells(self) -> list[Cell]:
        """Every cell in row-major order."""
        return [Cell(column, row) for row in range(self.rows) for column in range(self.columns)]

    def _require_in_bounds(self, cell: Cell) -> None:
        if not self.in_bounds(cell.column, cell.row):
            raise PreconditionError(
                f"{cell} is outside the {self.columns}x{self.rows} grid"
            )

    def _index(self, cell: Cell) -> tuple[int, int]:
        """Array index (row, column) of an in-bounds cell."""
        self._require_in_bounds(cell)
        return cell.row, cell.column

    def adjacent_cells(
        self,
        cell: Cell,
        ignore_blocked: bool = False,
        ignore_visited: bool = False,
    ) -> list[Cell]:
        """
        Get the neighbours of a cell.

        Order is right, down, left, up, followed by the four diagonals when
        diagonal search is enabled. The start cell is never returned.

        Args:
            cell: Cell whose neighbours to list
            ignore_blocked: Skip blocked neighbours
            ignore_visited: Skip neighbours already visited this run
        """
        offsets = ORTHOGONAL_OFFSETS
        if self.allow_diagonal:
            offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS

        adjacent = []
        for d_column, d_row in offsets:
            neighbour = self.get_cell(cell.column + d_column, cell.row + d_row)
            if neighbour is None:
                continue
            if ignore_blocked and self.is_blocked(neighbour):
                continue
            if ignore_visited and self.is_visited(neighbour):
                continue
            if neighbour == self._start:
                continue
            adjacent.append(neighbour)
        return adjacent

    # =========================================================================
    # Flags
    # =========================================================================

    def is_blocked(self, cell: Cell) -> bool:
        return bool(self._blocked[self._index(cell)])

    def is_visited(self, cell: Cell) -> bool:
        return bool(self._visited[self._index(cell)])

    def is_in_path(self, cell: Cell) -> bool:
        return bool(self._in_path[self._index(cell)])

    def blocked_count(self) -> int:
        return int(self._blocked.sum())

    def visited_count(self) -> int:
        return int(self._visited.sum())

    def open_cells(self) -> list[Cell]:
        """All cells that are not blocked, in row-major order."""
        rows, columns = np.nonzero(~self._blocked)
        return [Cell(int(c), int(r)) for r, c in zip(rows, columns, strict=True)]

    def mark_visited(self, cell: Cell) -> None:
        """
        Mark a cell as examined by the running search.

        Idempotent within a run: a cell already visited is not counted or
        reported again. Each new visit is passed to the observer, which is
        where step pacing happens.
        """
        index = self._index(cell)
        if self._visited[index]:
            return
        self._visited[index] = True
        count = self.cells_checked
        self.cells_checked += 1
        self.observer.on_visit(cell, count)

    def mark_path(self, path: list[Cell]) -> None:
        """Flag every cell of a found path."""
        for cell in path:
            self._in_path[self._index(cell)] = True
            self.observer.on_path(cell)

    def set_blocked(self, cell: Cell, blocked: bool) -> None:
        """User edit: block or unblock a single cell."""
        index = self._index(cell)
        if blocked and (cell == self._start or cell == self._end):
            raise PreconditionError(f"Cannot block the start or end cell {cell}")
        self._blocked[index] = blocked

    def toggle_blocked(self, cell: Cell) -> bool:
        """Flip a cell's blocked state and return the new value."""
        blocked = not self.is_blocked(cell)
        self.set_blocked(cell, blocked)
        return blocked

    def block_wall(self, *cells: Cell) -> None:
        """
        Block a run of cells, skipping the start and end cells.

        Every cell is checked before any is blocked, so an out-of-bounds
        cell leaves the grid unchanged. Reports the wall to the observer and
        pauses briefly for display.

        Raises:
            PreconditionError: If any cell lies outside the grid
        """
        indexes = [self._index(cell) for cell in cells]
        placed = []
        for cell, index in zip(cells, indexes, strict=True):
            if cell == self._start or cell == self._end:
                continue
            self._blocked[index] = True
            placed.append(cell)
        self.observer.on_block(placed)
        self.wait(WALL_PAUSE_MS)

    def unblock(self, *cells: Cell) -> None:
        """Open cells; all are bounds-checked before any is changed."""
        for index in [self._index(cell) for cell in cells]:
            self._blocked[index] = False

    def fill_all_blocked(self) -> None:
        """Block every cell except start and end."""
        self._blocked[:, :] = True
        for cell in (self._start, self._end):
            if cell is not None:
                self._blocked[cell.row, cell.column] = False

    def wait(self, duration_ms: float) -> None:
        """Cooperative pacing primitive, handled by the observer."""
        self.observer.pause(duration_ms)

    # =========================================================================
    # Housekeeping
    # =========================================================================

    def clear_visited(self) -> None:
        """Reset the visited markers before a new search run."""
        self._visited[:, :] = False
        self.cells_checked = 0

    def clear_path(self) -> None:
        """Remove visited markers and the highlighted path."""
        self.clear_visited()
        self._in_path[:, :] = False

    def clear_blocks(self) -> None:
        self._blocked[:, :] = False

    def reset(self) -> None:
        """Clear all flags and restore the initial start/end layout."""
        self.clear_path()
        self.clear_blocks()
        self._set_initial_start_end()

    def resize(self, columns: int, rows: int) -> None:
        """Rebuild the grid at a new size; all flags and markers are reset."""
        logger.info(f"Resizing grid {self.columns}x{self.rows} -> {columns}x{rows}")
        self._allocate(columns, rows)
        self.cells_checked = 0
        self._set_initial_start_end()

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def to_text(self, path: list[Cell] | None = None) -> str:
        """
        Render the grid as text, one line per row.

        '#' blocked, 'S' start, 'E' end, '*' path, '.' visited, ' ' open.
        """
        on_path = set(path or [])
        lines = []
        for row in range(self.rows):
            chars = []
            for column in range(self.columns):
                cell = Cell(column, row)
                if cell == self._start:
                    chars.append("S")
                elif cell == self._end:
                    chars.append("E")
                elif self.is_blocked(cell):
                    chars.append("#")
                elif cell in on_path or self.is_in_path(cell):
                    chars.append("*")
                elif self.is_visited(cell):
                    chars.append(".")
                else:
                    chars.append(" ")
            lines.append("".join(chars))
        return "\n".join(lines)

    def stats(self) -> dict:
        """Summary counts for the current grid state."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "blocked": self.blocked_count(),
            "visited": self.visited_count(),
            "path_cells": int(self._in_path.sum()),
            "allow_diagonal": self.allow_diagonal,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(columns={self.columns}, rows={self.rows}, "
            f"start={self._start!r}, end={self._end!r})"
        )
