"""
Session controller that runs searches and maze generation on one grid.

Owns the grid, the pacing observer and the single-run guard: only one
search or maze generation may be active at a time. Pixel rendering and
input handling live outside; they call into this class.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pathfinder.config import (
    ALLOW_DIAGONAL_SEARCH,
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    DEFAULT_SPEED,
    SIZE_PRESETS,
)
from pathfinder.exceptions import AlgorithmRunningError
from pathfinder.grid.grid import Cell, Grid
from pathfinder.grid.observer import SpeedPacer
from pathfinder.maze import get_maze_generator
from pathfinder.search import get_path_strategy
from pathfinder.session.state import MazeResult, SearchResult

if TYPE_CHECKING:
    from pathfinder.grid.observer import StepObserver

logger = logging.getLogger(__name__)


class PathfinderSession:
    """
    Runs path searches and maze generators against a shared grid.

    The session handles:
    - Resetting visited markers before each search
    - Marking the found path on the grid
    - Recording cells checked, path length and timing
    - Refusing to start a run while another is in progress
    """

    def __init__(
        self,
        columns: int = DEFAULT_COLUMNS,
        rows: int = DEFAULT_ROWS,
        speed: str = DEFAULT_SPEED,
        allow_diagonal: bool = ALLOW_DIAGONAL_SEARCH,
        observer: StepObserver | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            columns: Grid columns
            rows: Grid rows
            speed: Pacing speed level (ignored when `observer` is given)
            allow_diagonal: Enable 8-neighbour search
            observer: Custom step observer; defaults to a SpeedPacer
        """
        self._pacer = observer if observer is not None else SpeedPacer(speed)
        self.grid = Grid(columns, rows, allow_diagonal=allow_diagonal, observer=self._pacer)
        self._running = False
        self.last_result: SearchResult | None = None

    @property
    def running(self) -> bool:
        """Whether an algorithm is currently running."""
        return self._running

    def _begin(self) -> None:
        if self._running:
            raise AlgorithmRunningError("An algorithm is already running on this grid")
        self._running = True

    def _end(self) -> None:
        self._running = False

    def find_path(self, algorithm_name: str) -> SearchResult:
        """
        Run a path search and highlight the result.

        Args:
            algorithm_name: Name accepted by get_path_strategy

        Returns:
            SearchResult with the path (possibly empty) and run statistics

        Raises:
            UnsupportedStrategyError: If the algorithm is unknown
            AlgorithmRunningError: If another run is active
            PreconditionError: If the grid lacks a start or end cell
        """
        strategy = get_path_strategy(algorithm_name)
        self._begin()
        try:
            self.grid.clear_path()
            logger.info(
                f"Starting {strategy.name}: {self.grid.start} -> {self.grid.end} "
                f"on {self.grid.columns}x{self.grid.rows}"
            )

            start_time = time.time() * 1000
            path = strategy.search(self.grid)
            self.grid.mark_path(path)
            elapsed = time.time() * 1000 - start_time

            result = SearchResult(
                algorithm=strategy.name,
                path=path,
                cells_checked=self.grid.cells_checked,
                elapsed_ms=elapsed,
            )
        finally:
            self._end()

        if result.found:
            logger.info(
                f"{result.algorithm}: path of {result.solution_length} cells, "
                f"{result.cells_checked} cells checked"
            )
        else:
            logger.info(f"{result.algorithm}: no path, {result.cells_checked} cells checked")

        self.last_result = result
        return result

    def generate_maze(self, algorithm_name: str, seed: int | None = None, **kwargs) -> MazeResult:
        """
        Clear the grid and generate a maze on it.

        Args:
            algorithm_name: Name accepted by get_maze_generator
            seed: Random seed for a reproducible maze
            **kwargs: Extra generator options (e.g., orientation)

        Raises:
            UnsupportedStrategyError: If the algorithm is unknown
            AlgorithmRunningError: If another run is active
        """
        generator = get_maze_generator(algorithm_name, seed=seed, **kwargs)
        self._begin()
        try:
            self.grid.clear_path()
            self.grid.clear_blocks()
            self.last_result = None
            logger.info(f"Generating {generator.name} maze (seed={seed})")

            start_time = time.time() * 1000
            generator.generate(self.grid)
            elapsed = time.time() * 1000 - start_time
        finally:
            self._end()

        result = MazeResult(
            algorithm=generator.name,
            blocked_cells=self.grid.blocked_count(),
            seed=seed,
            elapsed_ms=elapsed,
        )
        logger.info(f"{result.algorithm}: {result.blocked_cells} cells blocked")
        return result

    # =========================================================================
    # Grid editing (refused while a run is active)
    # =========================================================================

    def _require_idle(self) -> None:
        if self._running:
            raise AlgorithmRunningError("Grid cannot be edited while an algorithm is running")

    def toggle_block(self, column: int, row: int) -> bool:
        """Toggle a wall at (column, row); returns the new blocked state."""
        self._require_idle()
        return self.grid.toggle_blocked(Cell(column, row))

    def move_start(self, column: int, row: int) -> None:
        self._require_idle()
        self.grid.move_start(Cell(column, row))

    def move_end(self, column: int, row: int) -> None:
        self._require_idle()
        self.grid.move_end(Cell(column, row))

    def clear_path(self) -> None:
        self._require_idle()
        self.grid.clear_path()

    def clear_blocks(self) -> None:
        """Remove all walls and the previous search highlight."""
        self._require_idle()
        self.grid.clear_blocks()
        self.grid.clear_path()

    def reset(self) -> None:
        """Restore the grid to its initial state."""
        self._require_idle()
        self.grid.reset()
        self.last_result = None

    def resize(self, columns: int, rows: int) -> None:
        self._require_idle()
        self.grid.resize(columns, rows)
        self.last_result = None

    def resize_preset(self, preset: str) -> None:
        """Resize to a named preset (small, medium, large, very-large)."""
        if preset not in SIZE_PRESETS:
            available = ", ".join(SIZE_PRESETS)
            raise ValueError(f"Unknown size preset '{preset}'. Available: {available}")
        self.resize(*SIZE_PRESETS[preset])

    def set_speed(self, level: str) -> None:
        """Change the pacing speed (only applies to the default SpeedPacer)."""
        if not isinstance(self._pacer, SpeedPacer):
            raise TypeError("Speed can only be set on a session using SpeedPacer")
        self._pacer.speed = level

    def set_allow_diagonal(self, allow: bool) -> None:
        self._require_idle()
        self.grid.allow_diagonal = allow

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(grid={self.grid!r}, running={self._running})"
