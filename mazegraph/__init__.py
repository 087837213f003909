"""
Maze Graph.

Turns a textual grid maze into an undirected graph of open cells and
answers shortest-path, traversal-order and structural-matrix questions
over it.
"""

__version__ = "0.1.0"
