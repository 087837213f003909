"""
Heuristics module.

Provides distance functions for guiding traversal:
- manhattan_distance: |Δrow| + |Δcol| between two nodes
"""

from mazegraph.heuristics.distance import manhattan_distance

__all__ = ["manhattan_distance"]
