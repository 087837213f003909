"""
Result dataclass for searches and traversals.
"""

from __future__ import annotations

from dataclasses import dataclass

from mazegraph.pathfinding import path_length


@dataclass(frozen=True)
class SearchResult:
    """
    Complete record of one search or traversal run.

    Attributes:
        name: Which algorithm produced this result
        node_ids: Node ids in path or visit order (empty if no path)
        elapsed_ms: Wall time spent in the algorithm (milliseconds)
    """

    name: str
    node_ids: tuple[int, ...]
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        """Whether the result holds at least one node."""
        return bool(self.node_ids)

    @property
    def steps(self) -> int | None:
        """Number of edges between first and last node, None if empty."""
        return path_length(self.node_ids)

    @property
    def visited_count(self) -> int:
        return len(self.node_ids)
