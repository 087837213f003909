"""
Breadth-first (level order) traversal.
"""

from __future__ import annotations

import logging
from collections import deque

from mazegraph.graph.model import Graph

logger = logging.getLogger(__name__)


def bfs(graph: Graph, start: int) -> tuple[int, ...]:
    """Visit every node reachable from start, recording each at dequeue time."""
    graph.get_node(start)

    result: list[int] = []
    queue = deque([start])
    visited = {start}

    while queue:
        current = queue.popleft()
        result.append(current)
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug(f"BFS from {start}: {len(result)} nodes")
    return tuple(result)
