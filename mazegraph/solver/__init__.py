"""
Solver module.

Ties the pipeline together for one loaded maze:
- MazeSolver: Parses, builds and answers queries, caching derived views
- SearchResult: Record of one search or traversal run
"""

from mazegraph.solver.engine import MazeSolver
from mazegraph.solver.result import SearchResult

__all__ = [
    "MazeSolver",
    "SearchResult",
]
