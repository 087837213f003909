"""
Pathfinding module.

Provides shortest-path search on the maze graph:
- shortest_path: BFS, minimum edge count between two nodes
- path_length: Edge count of a path (None for "no path")
"""

from mazegraph.pathfinding.shortest_path import path_length, shortest_path

__all__ = ["path_length", "shortest_path"]
