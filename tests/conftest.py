"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathfinder.grid import Cell, Grid, StepObserver


class RecordingObserver(StepObserver):
    """Observer that remembers every callback instead of pacing."""

    def __init__(self) -> None:
        self.visits: list[Cell] = []
        self.walls: list[list[Cell]] = []
        self.path: list[Cell] = []
        self.pauses: list[float] = []

    def on_visit(self, cell: Cell, count: int) -> None:
        self.visits.append(cell)

    def on_block(self, cells: list[Cell]) -> None:
        self.walls.append(list(cells))

    def on_path(self, cell: Cell) -> None:
        self.path.append(cell)

    def pause(self, duration_ms: float) -> None:
        self.pauses.append(duration_ms)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def recorder() -> RecordingObserver:
    """Return a fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def open_grid(recorder: RecordingObserver) -> Grid:
    """5x5 grid with no walls, start=(0,2), end=(4,2), 4-neighbour moves."""
    return Grid(5, 5, start=Cell(0, 2), end=Cell(4, 2), allow_diagonal=False, observer=recorder)


@pytest.fixture
def walled_grid() -> Grid:
    """3x3 grid whose middle row is blocked between start=(0,1) and end=(2,1)."""
    grid = Grid(3, 3, start=Cell(0, 1), end=Cell(2, 1), allow_diagonal=False)
    grid.set_blocked(Cell(1, 1), True)
    return grid


@pytest.fixture
def enclosed_grid() -> Grid:
    """5x5 grid whose end cell (4,4) is walled in."""
    grid = Grid(5, 5, start=Cell(0, 0), end=Cell(4, 4), allow_diagonal=False)
    grid.set_blocked(Cell(3, 4), True)
    grid.set_blocked(Cell(4, 3), True)
    return grid
