"""
Adjacency and incidence matrices of the maze graph.

Rows (and adjacency columns) are indexed by node creation order. Both
matrices are built on first request and cached; the graph is frozen, so
the cache never goes stale.
"""

from __future__ import annotations

import logging

import numpy as np

from mazegraph.graph.model import Graph

logger = logging.getLogger(__name__)


class MatrixProjector:
    """
    Dense boolean matrix views of a Graph.

    Attributes:
        graph: The graph being projected
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._index: dict[int, int] = {
            node.id: idx for idx, node in enumerate(graph.nodes())
        }
        self._adjacency: np.ndarray | None = None
        self._incidence: np.ndarray | None = None
        self._edge_columns: tuple[tuple[int, int], ...] | None = None

    def index_of(self, node_id: int) -> int:
        """Matrix row index for a node id."""
        try:
            return self._index[node_id]
        except KeyError:
            raise KeyError(f"Node {node_id} not in graph") from None

    def index_map(self) -> dict[int, int]:
        """Copy of the node id -> matrix index mapping."""
        return dict(self._index)

    def adjacency_matrix(self) -> np.ndarray:
        """
        V x V boolean adjacency matrix.

        Symmetric with a false diagonal, since the adjacency lists are
        symmetric and free of self-loops.
        """
        if self._adjacency is None:
            size = len(self._index)
            matrix = np.zeros((size, size), dtype=bool)
            for origin, neighbors in self.graph.adjacency().items():
                i = self._index[origin]
                for neighbor in neighbors:
                    matrix[i, self._index[neighbor]] = True
            matrix.flags.writeable = False
            self._adjacency = matrix
            logger.debug(f"Built {size}x{size} adjacency matrix")
        return self._adjacency

    def incidence_matrix(self) -> np.ndarray:
        """
        V x E boolean incidence matrix.

        Each undirected edge gets one column, numbered in discovery order,
        with its two endpoint rows set.
        """
        if self._incidence is None:
            seen: set[tuple[int, int]] = set()
            columns: list[tuple[int, int]] = []
            matrix = np.zeros((len(self._index), self.graph.edge_count), dtype=bool)

            for origin, neighbors in self.graph.adjacency().items():
                i = self._index[origin]
                for neighbor in neighbors:
                    key = (min(origin, neighbor), max(origin, neighbor))
                    if key in seen:
                        continue
                    seen.add(key)
                    column = len(columns)
                    matrix[i, column] = True
                    matrix[self._index[neighbor], column] = True
                    columns.append(key)

            matrix.flags.writeable = False
            self._incidence = matrix
            self._edge_columns = tuple(columns)
            logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} incidence matrix")
        return self._incidence

    def edge_columns(self) -> tuple[tuple[int, int], ...]:
        """(id_a, id_b) endpoint pair for each incidence matrix column."""
        if self._edge_columns is None:
            self.incidence_matrix()
        return self._edge_columns

    @property
    def shapes(self) -> dict[str, tuple[int, int]]:
        """Shapes of both matrices, without building them."""
        size = len(self._index)
        return {
            "adjacency": (size, size),
            "incidence": (size, self.graph.edge_count),
        }
