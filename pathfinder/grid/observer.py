"""
Step observers: the pacing and animation hooks of a grid.

Search and maze engines are synchronous. Every visited cell, placed wall
and explicit wait is reported to the grid's observer, which decides
whether to slow the run down for display. Tests use the no-op base class.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pathfinder.config import DEFAULT_SPEED, SPEED_LEVELS

if TYPE_CHECKING:
    from pathfinder.grid.grid import Cell

logger = logging.getLogger(__name__)


class StepObserver:
    """
    Receives a callback for every step an algorithm takes on a grid.

    The base implementation does nothing, so runs complete as fast as
    possible. Subclasses override only the hooks they care about.
    """

    def on_visit(self, cell: Cell, count: int) -> None:
        """Called once per cell marked visited. `count` is the 0-indexed visit number."""
        pass

    def on_block(self, cells: list[Cell]) -> None:
        """Called after a wall of cells has been blocked."""
        pass

    def on_path(self, cell: Cell) -> None:
        """Called for each cell of a found path as it is marked."""
        pass

    def pause(self, duration_ms: float) -> None:
        """Explicit pacing request from an algorithm."""
        pass


class SpeedPacer(StepObserver):
    """
    Sleeps between steps according to a named speed level.

    Levels mirror the visualizer's speed selector: slow levels pause on
    every visited cell, fast levels only on every Nth one, and "Ludicrous"
    never pauses.
    """

    def __init__(self, speed: str = DEFAULT_SPEED) -> None:
        self._delay_ms: float | None = None
        self._every = 1
        self.speed = speed

    @property
    def speed(self) -> str:
        return self._speed

    @speed.setter
    def speed(self, level: str) -> None:
        if level not in SPEED_LEVELS:
            available = ", ".join(SPEED_LEVELS)
            raise ValueError(f"Unknown speed level '{level}'. Available: {available}")
        self._speed = level
        self._delay_ms, self._every = SPEED_LEVELS[level]
        logger.debug(f"Speed set to {level} (delay={self._delay_ms}ms every {self._every})")

    def _sleep(self, duration_ms: float) -> None:
        time.sleep(duration_ms / 1000)

    def on_visit(self, cell: Cell, count: int) -> None:
        if self._delay_ms is None:
            return
        if count % self._every == 0:
            self._sleep(self._delay_ms)

    def on_path(self, cell: Cell) -> None:
        if self._delay_ms is not None:
            self._sleep(0)

    def pause(self, duration_ms: float) -> None:
        if self._delay_ms is None:
            return
        self._sleep(duration_ms)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(speed={self._speed!r})"
