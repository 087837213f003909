"""
Traversal module.

Provides the traversal strategies over the maze graph:
- PREORDER / INORDER / POSTORDER: Depth-first visit orders
- BREADTH_FIRST: Level order
- GREEDY: Best-first toward a goal by Manhattan distance

Each strategy is a pure function (graph, start[, goal]) -> tuple of node ids.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from mazegraph.traversal.breadth_first import bfs
from mazegraph.traversal.depth_first import dfs_inorder, dfs_postorder, dfs_preorder
from mazegraph.traversal.greedy import greedy_best_first

if TYPE_CHECKING:
    from mazegraph.graph.model import Graph

__all__ = [
    "TraversalStrategy",
    "bfs",
    "dfs_inorder",
    "dfs_postorder",
    "dfs_preorder",
    "get_traversal",
    "greedy_best_first",
    "run_traversal",
]


class TraversalStrategy(Enum):
    """Closed set of traversal strategies, valued by their CLI name."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"
    BREADTH_FIRST = "bfs"
    GREEDY = "greedy"

    @property
    def needs_goal(self) -> bool:
        return self is TraversalStrategy.GREEDY

    @property
    def title(self) -> str:
        """Human-readable name used in printed reports."""
        return {
            TraversalStrategy.PREORDER: "DFS - Preorder",
            TraversalStrategy.INORDER: "DFS - Inorder",
            TraversalStrategy.POSTORDER: "DFS - Postorder",
            TraversalStrategy.BREADTH_FIRST: "BFS (level order)",
            TraversalStrategy.GREEDY: "Greedy best-first (heuristic)",
        }[self]


def get_traversal(name: str) -> TraversalStrategy:
    """
    Get a traversal strategy by name.

    Args:
        name: Strategy identifier (preorder, inorder, postorder, bfs, greedy)

    Returns:
        The matching TraversalStrategy

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return TraversalStrategy(name.lower())
    except ValueError:
        available = ", ".join(s.value for s in TraversalStrategy)
        raise ValueError(f"Unknown traversal '{name}'. Available: {available}") from None


def run_traversal(
    strategy: TraversalStrategy,
    graph: Graph,
    start: int,
    goal: int | None = None,
) -> tuple[int, ...]:
    """
    Run one traversal strategy.

    Args:
        strategy: Which traversal to run
        graph: The maze graph
        start: Id of the starting node
        goal: Id of the goal node (required for GREEDY, ignored otherwise)

    Returns:
        Node ids in visit order

    Raises:
        ValueError: If GREEDY is requested without a goal
        KeyError: If start or goal is not in the graph
    """
    if strategy is TraversalStrategy.PREORDER:
        return dfs_preorder(graph, start)
    if strategy is TraversalStrategy.INORDER:
        return dfs_inorder(graph, start)
    if strategy is TraversalStrategy.POSTORDER:
        return dfs_postorder(graph, start)
    if strategy is TraversalStrategy.BREADTH_FIRST:
        return bfs(graph, start)

    if goal is None:
        raise ValueError(f"Traversal '{strategy.value}' requires a goal node")
    return greedy_best_first(graph, start, goal)
