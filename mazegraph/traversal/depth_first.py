"""
Depth-first traversals in preorder, inorder and postorder.

All three share one explicit-stack walk that reproduces the recursive
visit order exactly: a node is marked visited on entry, and each neighbor
is checked against the visited set at the moment the walk reaches it in
the node's adjacency list.

Inorder is generalized to arbitrary degree by splitting the adjacency
list in half by position: the node is recorded after the first
floor(deg/2) positions have been handled. The split has no spatial
meaning; it is only deterministic.
"""

from __future__ import annotations

import logging
from enum import Enum

from mazegraph.graph.model import Graph

logger = logging.getLogger(__name__)


class VisitOrder(Enum):
    PRE = "pre"
    IN = "in"
    POST = "post"


def dfs_preorder(graph: Graph, start: int) -> tuple[int, ...]:
    """Record each node when first reached, then descend into its neighbors."""
    return _depth_first(graph, start, VisitOrder.PRE)


def dfs_inorder(graph: Graph, start: int) -> tuple[int, ...]:
    """Descend into the first half of the neighbors, record the node, then the rest."""
    return _depth_first(graph, start, VisitOrder.IN)


def dfs_postorder(graph: Graph, start: int) -> tuple[int, ...]:
    """Descend into all neighbors first, record the node last."""
    return _depth_first(graph, start, VisitOrder.POST)


def _depth_first(graph: Graph, start: int, order: VisitOrder) -> tuple[int, ...]:
    graph.get_node(start)

    result: list[int] = []
    visited = {start}
    if order is VisitOrder.PRE:
        result.append(start)

    # Frame: [node, neighbors, next position]
    stack: list[list] = [[start, graph.neighbors(start), 0]]

    while stack:
        frame = stack[-1]
        node, neighbors, position = frame

        if order is VisitOrder.IN and position == len(neighbors) // 2:
            result.append(node)

        if position == len(neighbors):
            if order is VisitOrder.POST:
                result.append(node)
            stack.pop()
            continue

        frame[2] = position + 1
        neighbor = neighbors[position]
        if neighbor in visited:
            continue

        visited.add(neighbor)
        if order is VisitOrder.PRE:
            result.append(neighbor)
        stack.append([neighbor, graph.neighbors(neighbor), 0])

    logger.debug(f"DFS {order.value}order from {start}: {len(result)} nodes")
    return tuple(result)
