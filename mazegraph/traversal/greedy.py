"""
Greedy best-first traversal toward a goal.

Nodes are expanded in order of Manhattan distance to the goal. This is a
traversal-order heuristic, not a cost-optimal search: there is no path
cost bookkeeping, and a node's priority is fixed when it is pushed.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from mazegraph.graph.model import Graph
from mazegraph.heuristics import manhattan_distance

logger = logging.getLogger(__name__)


def greedy_best_first(graph: Graph, start: int, goal: int) -> tuple[int, ...]:
    """
    Traverse from start, always popping the node closest to goal.

    Stops as soon as the goal is popped. If the goal is unreachable, every
    node reachable from start is visited.

    Returns:
        Node ids in the order they were popped

    Raises:
        KeyError: If start or goal is not in the graph
    """
    goal_node = graph.get_node(goal)

    def priority(node_id: int) -> int:
        return manhattan_distance(graph.get_node(node_id), goal_node)

    # (distance, push order, node); push order breaks ties FIFO
    counter = itertools.count()
    frontier = [(priority(start), next(counter), start)]
    visited = {start}
    result: list[int] = []

    while frontier:
        _, _, current = heapq.heappop(frontier)
        result.append(current)

        if current == goal:
            break

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                heapq.heappush(frontier, (priority(neighbor), next(counter), neighbor))

    logger.debug(
        f"Greedy best-first {start} -> {goal}: {len(result)} nodes, "
        f"goal {'reached' if result[-1] == goal else 'not reached'}"
    )
    return tuple(result)
