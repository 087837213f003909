"""
Unit tests for MatrixProjector.
"""

import numpy as np
import pytest

from mazegraph.graph import MatrixProjector, build_graph
from mazegraph.maze import parse_lines


class TestPairMatrices:
    """A next to B: the smallest connected maze."""

    def test_adjacency(self, pair_graph):
        matrix = MatrixProjector(pair_graph).adjacency_matrix()
        assert matrix.dtype == bool
        assert np.array_equal(matrix, np.array([[0, 1], [1, 0]], dtype=bool))

    def test_incidence(self, pair_graph):
        matrix = MatrixProjector(pair_graph).incidence_matrix()
        assert matrix.dtype == bool
        assert np.array_equal(matrix, np.array([[1], [1]], dtype=bool))

    def test_counts(self, pair_graph):
        assert pair_graph.node_count == 2
        assert pair_graph.edge_count == 1


class TestAdjacencyMatrix:
    """Test adjacency matrix properties."""

    def test_shape(self, sample_graph):
        n = sample_graph.node_count
        assert MatrixProjector(sample_graph).adjacency_matrix().shape == (n, n)

    def test_symmetric(self, sample_graph):
        matrix = MatrixProjector(sample_graph).adjacency_matrix()
        assert np.array_equal(matrix, matrix.T)

    def test_diagonal_false(self, sample_graph):
        matrix = MatrixProjector(sample_graph).adjacency_matrix()
        assert not matrix.diagonal().any()

    def test_row_sums_are_degrees(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        matrix = projector.adjacency_matrix()
        for node_id in ring_graph.node_ids():
            row = matrix[projector.index_of(node_id)]
            assert row.sum() == len(ring_graph.neighbors(node_id))

    def test_entries_match_neighbors(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        matrix = projector.adjacency_matrix()
        for a in ring_graph.node_ids():
            for b in ring_graph.node_ids():
                expected = b in ring_graph.neighbors(a)
                assert matrix[projector.index_of(a), projector.index_of(b)] == expected

    def test_cached_and_identical(self, sample_graph):
        """Repeated requests return the same, unchanged matrix."""
        projector = MatrixProjector(sample_graph)
        first = projector.adjacency_matrix()
        second = projector.adjacency_matrix()
        assert first is second
        assert np.array_equal(first, second)

    def test_fresh_projectors_agree(self, sample_graph):
        a = MatrixProjector(sample_graph).adjacency_matrix()
        b = MatrixProjector(sample_graph).adjacency_matrix()
        assert np.array_equal(a, b)

    def test_read_only(self, ring_graph):
        """Cached matrices cannot be written through."""
        matrix = MatrixProjector(ring_graph).adjacency_matrix()
        with pytest.raises(ValueError):
            matrix[0, 0] = True


class TestIncidenceMatrix:
    """Test incidence matrix properties."""

    def test_shape(self, sample_graph):
        matrix = MatrixProjector(sample_graph).incidence_matrix()
        assert matrix.shape == (sample_graph.node_count, sample_graph.edge_count)

    def test_two_endpoints_per_column(self, sample_graph):
        matrix = MatrixProjector(sample_graph).incidence_matrix()
        assert (matrix.sum(axis=0) == 2).all()

    def test_row_sums_are_degrees(self, sample_graph):
        projector = MatrixProjector(sample_graph)
        matrix = projector.incidence_matrix()
        for node_id in sample_graph.node_ids():
            assert matrix[projector.index_of(node_id)].sum() == len(sample_graph.neighbors(node_id))

    def test_edge_columns_discovery_order(self, ring_graph):
        """Columns are numbered as edges are first met in the adjacency lists."""
        projector = MatrixProjector(ring_graph)
        assert projector.edge_columns() == (
            (0, 3), (0, 1), (1, 2), (2, 4), (3, 5), (4, 7), (5, 6), (6, 7),
        )
        assert list(projector.edge_columns()) == ring_graph.edges()

    def test_columns_mark_their_endpoints(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        matrix = projector.incidence_matrix()
        for column, (a, b) in enumerate(projector.edge_columns()):
            rows = set(np.flatnonzero(matrix[:, column]))
            assert rows == {projector.index_of(a), projector.index_of(b)}

    def test_no_edges(self):
        """Isolated nodes give a matrix with no columns."""
        graph = build_graph(parse_lines(["A*B"]))
        matrix = MatrixProjector(graph).incidence_matrix()
        assert matrix.shape == (2, 0)

    def test_cached(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        assert projector.incidence_matrix() is projector.incidence_matrix()

    def test_read_only(self, ring_graph):
        matrix = MatrixProjector(ring_graph).incidence_matrix()
        with pytest.raises(ValueError):
            matrix[0, 0] = False


class TestIndexMap:
    """Test the node id -> matrix index mapping."""

    def test_creation_order(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        assert projector.index_map() == {node_id: node_id for node_id in range(8)}

    def test_index_map_is_a_copy(self, ring_graph):
        projector = MatrixProjector(ring_graph)
        projector.index_map()[0] = 5
        assert projector.index_of(0) == 0

    def test_unknown_id_raises(self, ring_graph):
        with pytest.raises(KeyError):
            MatrixProjector(ring_graph).index_of(99)

    def test_shapes_property(self, ring_graph):
        assert MatrixProjector(ring_graph).shapes == {
            "adjacency": (8, 8),
            "incidence": (8, 8),
        }
