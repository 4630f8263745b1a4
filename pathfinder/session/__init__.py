"""
Session module.

Provides run management on a grid:
- PathfinderSession: runs searches and mazes with a single-run guard
- SearchResult: record of a finished search
- MazeResult: record of a finished maze generation
"""

from pathfinder.session.engine import PathfinderSession
from pathfinder.session.state import MazeResult, SearchResult

__all__ = [
    "PathfinderSession",
    "SearchResult",
    "MazeResult",
]
