"""
Graph module.

Provides the maze graph and its derived views:
- Node: Open maze cell (position-based equality)
- Graph: Undirected adjacency-list graph, frozen after construction
- build_graph: Grid -> Graph conversion
- MatrixProjector: Adjacency and incidence matrices
"""

from mazegraph.graph.builder import build_graph
from mazegraph.graph.matrices import MatrixProjector
from mazegraph.graph.model import Graph, Node

__all__ = [
    "Graph",
    "MatrixProjector",
    "Node",
    "build_graph",
]
