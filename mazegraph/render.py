"""
Text rendering for maze graph results.

Every function returns a string; printing is left to the caller.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from mazegraph.config import (
    MATRIX_CELL_WIDTH,
    OPEN_DISPLAY_CHAR,
    PATH_CHAR,
    SEQUENCE_SEPARATOR,
)
from mazegraph.graph.model import Graph
from mazegraph.maze.parser import CellMarker, MazeGrid


def format_sequence(graph: Graph, node_ids: Sequence[int]) -> str:
    """Node markers joined by arrows, open cells shown as a dot."""
    labels = []
    for node_id in node_ids:
        node = graph.get_node(node_id)
        labels.append(OPEN_DISPLAY_CHAR if node.marker is CellMarker.OPEN else node.label)
    return SEQUENCE_SEPARATOR.join(labels)


def format_path(graph: Graph, path: Sequence[int]) -> str:
    """Report for a shortest path."""
    if not path:
        return "No path between A and B"
    return "\n".join([
        "=== SHORTEST PATH ===",
        f"Path length: {len(path) - 1} steps",
        f"Path: {format_sequence(graph, path)}",
    ])


def format_traversal(graph: Graph, name: str, order: Sequence[int]) -> str:
    """Report for one traversal."""
    return "\n".join([
        f"=== TRAVERSAL {name.upper()} ===",
        f"Nodes visited: {len(order)}",
        f"Order: {format_sequence(graph, order)}",
    ])


def render_maze(grid: MazeGrid, graph: Graph | None = None, path: Sequence[int] = ()) -> str:
    """
    The maze as text, with interior path cells drawn in.

    The first and last nodes of the path keep their markers.

    Raises:
        ValueError: If a path is given without the graph its ids belong to
    """
    if path and graph is None:
        raise ValueError("Drawing a path requires the graph its node ids belong to")
    rows = [list(line) for line in grid.lines]
    for node_id in path[1:-1]:
        node = graph.get_node(node_id)
        rows[node.row][node.col] = PATH_CHAR
    return "\n".join("".join(row) for row in rows)


def format_matrix(title: str, matrix: np.ndarray, width: int = MATRIX_CELL_WIDTH) -> str:
    """Indexed 0/1 table of a boolean matrix."""
    n_rows, n_cols = matrix.shape
    lines = [
        f"=== {title.upper()} ===",
        f"Dimension: {n_rows}x{n_cols}",
        " " * (width + 1) + " ".join(f"{j:>{width}}" for j in range(n_cols)),
    ]
    for i in range(n_rows):
        cells = " ".join(f"{int(v):>{width}}" for v in matrix[i])
        lines.append(f"{i:>{width}} {cells}".rstrip())
    return "\n".join(lines)


def format_summary(summary: dict) -> str:
    """Key: value lines for a solver summary."""
    return "\n".join([
        f"Size: {summary['rows']}x{summary['columns']}",
        f"Nodes: {summary['nodes']:,}",
        f"Edges: {summary['edges']:,}",
        f"Start (A): {summary['start']}",
        f"Goal (B): {summary['goal']}",
    ])
