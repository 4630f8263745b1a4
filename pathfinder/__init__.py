"""
Pathfinder: grid pathfinding and maze generation.

Runs classic graph searches (A*, Dijkstra, BFS, DFS, Greedy Best-First)
and procedural maze generators over a bounded 2D grid, with pacing hooks
for step-by-step visualization.
"""

__version__ = "0.1.0"
