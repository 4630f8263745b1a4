"""
Grid module.

Provides the grid the algorithms operate on:
- Cell: (column, row) handle
- Grid: dense cell-flag store and neighbour lookup
- StepObserver / SpeedPacer: pacing hooks called on every step
"""

from pathfinder.grid.grid import Cell, Grid
from pathfinder.grid.observer import SpeedPacer, StepObserver

__all__ = ["Cell", "Grid", "StepObserver", "SpeedPacer"]
