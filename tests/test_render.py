"""
Unit tests for text rendering.
"""

import pytest

from mazegraph.graph import MatrixProjector, build_graph
from mazegraph.maze import parse_lines
from mazegraph.render import (
    format_matrix,
    format_path,
    format_sequence,
    format_summary,
    format_traversal,
    render_maze,
)


class TestSequences:
    """Test node sequence formatting."""

    def test_open_cells_as_dots(self):
        graph = build_graph(parse_lines(["A B"]))
        assert format_sequence(graph, (0, 1, 2)) == "A -> · -> B"

    def test_empty_sequence(self, ring_graph):
        assert format_sequence(ring_graph, ()) == ""

    def test_format_path(self, ring_graph):
        text = format_path(ring_graph, (0, 3, 5, 6, 7))
        assert "Path length: 4 steps" in text
        assert text.endswith("Path: A -> · -> · -> · -> B")

    def test_format_no_path(self, ring_graph):
        assert format_path(ring_graph, ()) == "No path between A and B"

    def test_format_traversal(self, ring_graph):
        text = format_traversal(ring_graph, "bfs", (0, 3, 1))
        assert text.splitlines() == [
            "=== TRAVERSAL BFS ===",
            "Nodes visited: 3",
            "Order: A -> · -> ·",
        ]


class TestMaze:
    """Test maze drawing."""

    def test_plain(self, ring_grid):
        assert render_maze(ring_grid) == "A  \n * \n  B"

    def test_with_path(self, ring_grid, ring_graph):
        """Interior path cells are drawn; A and B keep their markers."""
        assert render_maze(ring_grid, ring_graph, (0, 3, 5, 6, 7)) == "A  \n·* \n··B"

    def test_empty_path(self, ring_grid, ring_graph):
        assert render_maze(ring_grid, ring_graph, ()) == "A  \n * \n  B"

    def test_path_without_graph_raises(self, ring_grid):
        """A path cannot be drawn without the graph that resolves its ids."""
        with pytest.raises(ValueError, match="requires the graph"):
            render_maze(ring_grid, path=(0, 3, 5, 6, 7))


class TestMatrix:
    """Test matrix tables."""

    def test_adjacency_table(self, pair_graph):
        matrix = MatrixProjector(pair_graph).adjacency_matrix()
        assert format_matrix("Adjacency matrix", matrix).splitlines() == [
            "=== ADJACENCY MATRIX ===",
            "Dimension: 2x2",
            "      0   1",
            "  0   0   1",
            "  1   1   0",
        ]

    def test_incidence_table(self, pair_graph):
        matrix = MatrixProjector(pair_graph).incidence_matrix()
        lines = format_matrix("Incidence matrix", matrix).splitlines()
        assert lines[1] == "Dimension: 2x1"
        assert lines[3:] == ["  0   1", "  1   1"]


def test_format_summary():
    text = format_summary({
        "rows": 3,
        "columns": 4,
        "nodes": 10,
        "edges": 11,
        "start": (0, 0),
        "goal": (2, 3),
    })
    assert text.splitlines() == [
        "Size: 3x4",
        "Nodes: 10",
        "Edges: 11",
        "Start (A): (0, 0)",
        "Goal (B): (2, 3)",
    ]
