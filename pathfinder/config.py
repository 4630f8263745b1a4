"""
Configuration constants for the Pathfinder project.

All grid defaults, pacing levels and tunable parameters are defined here.
Values marked as overridable are read from the environment (a local .env
file is loaded first).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid dimensions (the "Small" preset)
DEFAULT_COLUMNS = int(os.environ.get("PATHFINDER_COLUMNS", "30"))
DEFAULT_ROWS = int(os.environ.get("PATHFINDER_ROWS", "20"))

# Grid size presets: name -> (columns, rows)
SIZE_PRESETS = {
    "small": (30, 20),
    "medium": (40, 30),
    "large": (40, 35),
    "very-large": (60, 50),
}

# 8-neighbour adjacency instead of 4
ALLOW_DIAGONAL_SEARCH = os.environ.get("PATHFINDER_DIAGONAL", "0").lower() in (
    "1",
    "true",
    "yes",
)

# =============================================================================
# Pacing Configuration
# =============================================================================

# Speed level -> (delay in ms, pause on every Nth visited cell).
# A delay of None disables pacing entirely.
SPEED_LEVELS = {
    "Very Slow": (500, 1),
    "Slow": (250, 1),
    "Normal": (25, 1),
    "Fast": (10, 10),
    "Very Fast": (0, 50),
    "Ludicrous": (None, 1),
}

DEFAULT_SPEED = os.environ.get("PATHFINDER_SPEED", "Normal")

# Pause after each lattice jump of the backtracking maze (ms)
MAZE_CARVE_PAUSE_MS = 10

# Pause after each wall placed by the division maze (ms)
WALL_PAUSE_MS = 10

# =============================================================================
# Maze Configuration
# =============================================================================

# Regions whose row or column span is below this are not bisected further
MIN_DIVISION_SPAN = 2

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
