"""
Builds the maze graph from a parsed grid.

Every non-wall cell becomes a node; 4-directionally adjacent non-wall
cells are joined by an undirected edge.
"""

from __future__ import annotations

import logging

from mazegraph.graph.model import Graph, Node
from mazegraph.maze.parser import MazeGrid, Position

logger = logging.getLogger(__name__)

# Probe order for neighbors: up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def build_graph(grid: MazeGrid) -> Graph:
    """
    Convert a grid into a frozen Graph.

    Two passes over the grid in row-major order:
    1. Assign a sequential id to each non-wall cell.
    2. For each non-wall cell, check up, down, left, right and connect
       every in-bounds non-wall neighbor.

    The start and goal nodes are recorded by the graph as they are added.
    """
    graph = Graph()
    position_to_id: dict[Position, int] = {}

    for row in range(grid.rows):
        for col in range(grid.columns):
            if grid.is_wall(row, col):
                continue
            node_id = len(position_to_id)
            graph.add_node(Node(id=node_id, row=row, col=col, marker=grid.cell(row, col)))
            position_to_id[(row, col)] = node_id

    for row in range(grid.rows):
        for col in range(grid.columns):
            if grid.is_wall(row, col):
                continue
            current = position_to_id[(row, col)]
            for d_row, d_col in DIRECTIONS:
                n_row, n_col = row + d_row, col + d_col
                if grid.in_bounds(n_row, n_col) and not grid.is_wall(n_row, n_col):
                    graph.add_edge(current, position_to_id[(n_row, n_col)])

    graph.freeze()
    logger.info(f"Built graph with {graph.node_count:,} nodes and {graph.edge_count:,} edges")
    return graph
