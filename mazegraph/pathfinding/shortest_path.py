"""
Breadth-first shortest path between two maze nodes.

Every edge has the same cost, so the first time BFS discovers a node is
along a shortest route to it.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from mazegraph.graph.model import Graph

logger = logging.getLogger(__name__)


def shortest_path(graph: Graph, start: int, goal: int) -> tuple[int, ...]:
    """
    Find a minimum-edge path from start to goal using BFS.

    Args:
        graph: The maze graph
        start: Id of the first node
        goal: Id of the last node

    Returns:
        Node ids from start to goal inclusive, or an empty tuple if goal is
        unreachable

    Raises:
        KeyError: If start or goal is not in the graph
    """
    graph.get_node(start)
    graph.get_node(goal)

    queue = deque([start])
    visited = {start}
    parents: dict[int, int | None] = {start: None}

    while queue:
        current = queue.popleft()

        if current == goal:
            path = _reconstruct(parents, goal)
            logger.debug(f"Shortest path {start} -> {goal}: {len(path) - 1} steps")
            return path

        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            # Parent is fixed at first discovery
            visited.add(neighbor)
            parents[neighbor] = current
            queue.append(neighbor)

    logger.debug(f"No path {start} -> {goal} ({len(visited)} nodes explored)")
    return ()


def _reconstruct(parents: dict[int, int | None], goal: int) -> tuple[int, ...]:
    path = []
    node: int | None = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    return tuple(reversed(path))


def path_length(path: Sequence[int]) -> int | None:
    """Number of edges in a path, or None if the path is empty."""
    if not path:
        return None
    return len(path) - 1
