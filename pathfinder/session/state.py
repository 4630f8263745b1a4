"""
Result dataclasses for completed pathfinder runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell


@dataclass
class SearchResult:
    """
    Complete record of a finished path search.

    Attributes:
        algorithm: Display name of the strategy that ran
        path: Cells from start to end inclusive ([] if no path)
        cells_checked: Number of cells marked visited
        elapsed_ms: Wall-clock run time in milliseconds (includes pacing)
        timestamp: When the search finished
    """

    algorithm: str
    path: list[Cell]
    cells_checked: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        """Whether the end cell was reached."""
        return bool(self.path)

    @property
    def solution_length(self) -> int:
        """Number of cells in the path (0 when no path was found)."""
        return len(self.path)


@dataclass
class MazeResult:
    """
    Record of a finished maze generation.

    Attributes:
        algorithm: Display name of the generator that ran
        blocked_cells: Number of blocked cells after generation
        seed: Seed used, if any
        elapsed_ms: Wall-clock run time in milliseconds (includes pacing)
        timestamp: When generation finished
    """

    algorithm: str
    blocked_cells: int
    seed: int | None
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)
