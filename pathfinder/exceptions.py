"""
Error types raised by the pathfinder core.

"No path found" is not an error: searches return an empty path instead.
"""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for all pathfinder errors."""


class UnsupportedStrategyError(PathfinderError, ValueError):
    """Raised when a search or maze algorithm name is not recognized."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unsupported algorithm '{name}'. Available: {', '.join(available)}"
        )


class PreconditionError(PathfinderError, ValueError):
    """Raised when a grid is malformed or an edit would break its invariants."""


class AlgorithmRunningError(PathfinderError, RuntimeError):
    """Raised when a run is requested while another one is still active."""
