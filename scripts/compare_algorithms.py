#!/usr/bin/env python3
"""
Quick comparison of every path search algorithm on a few seeded mazes.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathfinder.grid import StepObserver
from pathfinder.maze import SUPPORTED_MAZE_ALGORITHMS
from pathfinder.search import SUPPORTED_PATH_ALGORITHMS
from pathfinder.session import PathfinderSession

# Test cases: (maze generator, seed)
TEST_CASES = [
    (None, None),
    ("Recursive Backtracking", 1),
    ("Recursive Backtracking", 2),
    ("Recursive Division", 1),
    ("Recursive Division", 2),
    ("Recursive Division", 3),
]

ALGORITHMS = list(SUPPORTED_PATH_ALGORITHMS)


def run_comparison():
    print("=" * 70)
    print("Pathfinder - Algorithm Comparison")
    print("=" * 70)
    print(f"\nTesting {len(ALGORITHMS)} algorithms on {len(TEST_CASES)} grids...")
    print(f"Mazes available: {', '.join(SUPPORTED_MAZE_ALGORITHMS)}\n")

    results = {name: [] for name in ALGORITHMS}

    for i, (maze, seed) in enumerate(TEST_CASES, 1):
        label = f"{maze} (seed {seed})" if maze else "Open grid"
        print(f"\n[{i}/{len(TEST_CASES)}] {label}")
        print("-" * 50)

        # No-op observer: no pacing delays
        session = PathfinderSession(columns=31, rows=21, observer=StepObserver())
        if maze:
            session.generate_maze(maze, seed=seed)

        for name in ALGORITHMS:
            result = session.find_path(name)
            results[name].append((result.found, result.solution_length, result.cells_checked))

            status = "FOUND" if result.found else "NONE"
            print(
                f"  {name:18} : {status:5} length {result.solution_length:3} "
                f"checked {result.cells_checked:4}"
            )

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for name in ALGORITHMS:
        found = sum(1 for ok, _, _ in results[name] if ok)
        total = len(results[name])
        checked = sum(c for _, _, c in results[name]) / total
        print(f"  {name:18} : {found}/{total} found, avg {checked:.0f} cells checked")


if __name__ == "__main__":
    run_comparison()
