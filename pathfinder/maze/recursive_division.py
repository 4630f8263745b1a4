"""
Recursive division maze generator.

Repeatedly bisects the grid with walls that each carry a single opening:
  1. Bisect a region horizontally or vertically, leaving one gap in the wall.
  2. Queue the two sub-regions either side of the wall.
  3. Repeat until regions are too small to bisect.

A new wall must never seal an opening in a wall it touches, so every
opening is remembered as a border passage and bisect positions that would
line up with one are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathfinder.config import MIN_DIVISION_SPAN
from pathfinder.maze.base import MazeGenerator

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell, Grid

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class Region:
    """
    Inclusive rectangle of grid cells still open for subdivision.

    Attributes:
        start_column: Leftmost column
        start_row: Top row
        end_column: Rightmost column
        end_row: Bottom row
    """

    start_column: int
    start_row: int
    end_column: int
    end_row: int

    @property
    def column_span(self) -> int:
        return self.end_column - self.start_column

    @property
    def row_span(self) -> int:
        return self.end_row - self.start_row


class RecursiveDivision(MazeGenerator):
    """
    Wall-adding maze generator.

    Regions are processed from an explicit work-list. Each region picks an
    orientation (forced for the first region when `orientation` is given,
    otherwise 50/50), then a bisect index that does not block a border
    passage. If no index fits, the other orientation is tried once before
    the region is left open. All regions share one border-passage list.
    """

    def __init__(
        self,
        seed: int | None = None,
        orientation: str | None = None,
        min_span: int = MIN_DIVISION_SPAN,
    ) -> None:
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility
            orientation: Force the first bisection ("horizontal" or "vertical")
            min_span: Regions with a smaller row or column span are not bisected
        """
        super().__init__(seed)
        if orientation not in (None, HORIZONTAL, VERTICAL):
            raise ValueError(
                f"Orientation must be '{HORIZONTAL}' or '{VERTICAL}', got {orientation!r}"
            )
        self._orientation = orientation
        self._min_span = min_span

    @property
    def name(self) -> str:
        return "Recursive Division"

    @property
    def description(self) -> str:
        return "Bisect with single-gap walls until regions are too small"

    def _generate(self, grid: Grid) -> None:
        border_passages: list[Cell] = []
        work = [(Region(0, 0, grid.columns - 1, grid.rows - 1), self._orientation)]

        while work:
            region, forced = work.pop()
            if region.row_span < self._min_span or region.column_span < self._min_span:
                continue

            first = forced or self._choose_orientation()
            for orientation in (first, _other(first)):
                index = self._choose_bisect_index(region, orientation, border_passages)
                if index is not None:
                    break
            else:
                logger.debug(f"{self.name}: no legal wall in {region}, leaving it open")
                continue

            self._build_wall(grid, region, orientation, index, border_passages)

            # Pushed in reverse so the top/left sub-region is processed first
            first_half, second_half = _split(region, orientation, index)
            work.append((second_half, None))
            work.append((first_half, None))

    def _choose_orientation(self) -> str:
        return VERTICAL if self._rng.random() > 0.5 else HORIZONTAL

    def _choose_bisect_index(
        self,
        region: Region,
        orientation: str,
        border_passages: list[Cell],
    ) -> int | None:
        """
        Pick a row (horizontal) or column (vertical) strictly inside the region.

        Indices lining up with an opening in the wall bordering the region
        on either end of the new wall are excluded.

        Returns:
            The index, or None if no index is legal
        """
        if orientation == HORIZONTAL:
            blocked_indexes = {
                passage.row
                for passage in border_passages
                if passage.column in (region.start_column - 1, region.end_column + 1)
            }
            candidates = range(region.start_row + 1, region.end_row)
        else:
            blocked_indexes = {
                passage.column
                for passage in border_passages
                if passage.row in (region.start_row - 1, region.end_row + 1)
            }
            candidates = range(region.start_column + 1, region.end_column)

        possible = [index for index in candidates if index not in blocked_indexes]
        if not possible:
            return None
        return self._rng.choice(possible)

    def _build_wall(
        self,
        grid: Grid,
        region: Region,
        orientation: str,
        index: int,
        border_passages: list[Cell],
    ) -> None:
        """Block the wall at `index` except for one random opening."""
        if orientation == HORIZONTAL:
            opening = (self._rng.randint(region.start_column, region.end_column), index)
            positions = [(column, index) for column in range(region.start_column, region.end_column + 1)]
        else:
            opening = (index, self._rng.randint(region.start_row, region.end_row))
            positions = [(index, row) for row in range(region.start_row, region.end_row + 1)]

        cells = grid.get_cells(positions)
        wall = []
        for cell in cells:
            if (cell.column, cell.row) == opening:
                border_passages.append(cell)
            elif cell == grid.start or cell == grid.end:
                # Endpoints stay open, so they act as extra openings
                border_passages.append(cell)
            else:
                wall.append(cell)

        grid.block_wall(*wall)


def _other(orientation: str) -> str:
    return VERTICAL if orientation == HORIZONTAL else HORIZONTAL


def _split(region: Region, orientation: str, index: int) -> tuple[Region, Region]:
    """Sub-regions either side of a wall at `index`."""
    if orientation == HORIZONTAL:
        top = Region(region.start_column, region.start_row, region.end_column, index - 1)
        bottom = Region(region.start_column, index + 1, region.end_column, region.end_row)
        return top, bottom

    left = Region(region.start_column, region.start_row, index - 1, region.end_row)
    right = Region(index + 1, region.start_row, region.end_column, region.end_row)
    return left, right
