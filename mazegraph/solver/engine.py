"""
Solver facade for a single loaded maze.

The grid is parsed and the graph built once; every query afterwards runs
against the same frozen graph.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable

from mazegraph.graph import Graph, MatrixProjector, build_graph
from mazegraph.maze import MazeGrid, load_maze, parse_lines
from mazegraph.pathfinding import shortest_path
from mazegraph.solver.result import SearchResult
from mazegraph.traversal import TraversalStrategy, run_traversal

logger = logging.getLogger(__name__)


class MazeSolver:
    """
    Answers shortest-path, traversal and matrix queries for one maze.

    All searches start at the maze's start node; the shortest path and the
    greedy traversal target its goal node.
    """

    def __init__(self, grid: MazeGrid) -> None:
        """
        Build the graph for a parsed grid.

        Args:
            grid: A validated MazeGrid
        """
        self.grid = grid
        self.graph: Graph = build_graph(grid)
        self._matrices: MatrixProjector | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> MazeSolver:
        """Load a maze file and build its solver."""
        return cls(load_maze(path))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> MazeSolver:
        """Parse maze lines and build their solver."""
        return cls(parse_lines(lines))

    @property
    def start_id(self) -> int:
        return self.graph.start.id

    @property
    def goal_id(self) -> int:
        return self.graph.goal.id

    @property
    def matrices(self) -> MatrixProjector:
        """Matrix projector for the graph (created on first access)."""
        if self._matrices is None:
            self._matrices = MatrixProjector(self.graph)
        return self._matrices

    def shortest_path(self) -> SearchResult:
        """Shortest path from start to goal."""
        t0 = time.perf_counter()
        path = shortest_path(self.graph, self.start_id, self.goal_id)
        elapsed = (time.perf_counter() - t0) * 1000

        if path:
            logger.info(f"Shortest path found: {len(path) - 1} steps")
        else:
            logger.warning(f"No path from start {self.grid.start} to goal {self.grid.goal}")
        return SearchResult(name="shortest-path", node_ids=path, elapsed_ms=elapsed)

    def traverse(self, strategy: TraversalStrategy) -> SearchResult:
        """Run one traversal from the start node."""
        goal = self.goal_id if strategy.needs_goal else None

        t0 = time.perf_counter()
        order = run_traversal(strategy, self.graph, self.start_id, goal)
        elapsed = (time.perf_counter() - t0) * 1000

        logger.info(f"{strategy.title}: visited {len(order)} nodes")
        return SearchResult(name=strategy.value, node_ids=order, elapsed_ms=elapsed)

    def run_all_traversals(self) -> list[SearchResult]:
        """Run every traversal strategy, in declaration order."""
        return [self.traverse(strategy) for strategy in TraversalStrategy]

    def summary(self) -> dict:
        """Dimensions and counts for the loaded maze."""
        return {
            "rows": self.grid.rows,
            "columns": self.grid.columns,
            "nodes": self.graph.node_count,
            "edges": self.graph.edge_count,
            "start": self.grid.start,
            "goal": self.grid.goal,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.grid.rows}x{self.grid.columns}, "
            f"nodes={self.graph.node_count}, edges={self.graph.edge_count})"
        )
