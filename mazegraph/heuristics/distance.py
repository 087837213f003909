"""
Grid distance heuristics.
"""

from __future__ import annotations

from mazegraph.graph.model import Node


def manhattan_distance(a: Node, b: Node) -> int:
    """Manhattan distance between two nodes on a 4-connected grid."""
    return abs(a.row - b.row) + abs(a.col - b.col)
