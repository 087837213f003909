"""
Undirected maze graph backed by an adjacency list.

Nodes are open maze cells keyed by a sequential integer id. The graph is
mutable only during its construction phase; `freeze()` ends that phase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from mazegraph.errors import GraphFrozenError
from mazegraph.maze.parser import CellMarker, Position


@dataclass(frozen=True)
class Node:
    """
    An open cell of the maze.

    Two nodes are equal when they occupy the same (row, col), regardless
    of id or marker.

    Attributes:
        id: Sequential id assigned in row-major scan order
        row: Grid row
        col: Grid column
        marker: Cell kind (open, start or goal)
    """

    id: int = field(compare=False)
    row: int
    col: int
    marker: CellMarker = field(compare=False, default=CellMarker.OPEN)

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def label(self) -> str:
        """Single character shown for this node in printed sequences."""
        return self.marker.value


class Graph:
    """
    Undirected graph of maze cells.

    Neighbor lists keep insertion order. The builder scans cells in row-major
    order and checks up, down, left, right, so the up and left neighbors of
    an interior cell are already linked when it is visited: its list reads
    up, left, down, right. Each undirected edge appears once in both
    endpoint lists.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._adj: dict[int, list[int]] = {}
        self._by_position: dict[Position, int] = {}
        self._start: Node | None = None
        self._goal: Node | None = None
        self._frozen = False

    # --- Construction API ----------------------------------------------------

    def add_node(self, node: Node) -> None:
        """Register a node. Re-adding an existing id is a no-op."""
        self._check_mutable()
        if node.id in self._nodes:
            return

        self._nodes[node.id] = node
        self._adj[node.id] = []
        self._by_position[node.position] = node.id

        if node.marker is CellMarker.START:
            self._start = node
        elif node.marker is CellMarker.GOAL:
            self._goal = node

    def add_edge(self, a: int, b: int) -> None:
        """
        Connect two registered nodes in both directions.

        Raises:
            KeyError: If either endpoint is not in the graph
            ValueError: If a == b
        """
        self._check_mutable()
        for node_id in (a, b):
            if node_id not in self._nodes:
                raise KeyError(f"Node {node_id} not in graph")
        if a == b:
            raise ValueError(f"Self-loop on node {a} is not allowed")

        if b not in self._adj[a]:
            self._adj[a].append(b)
        if a not in self._adj[b]:
            self._adj[b].append(a)

    def freeze(self) -> Graph:
        """End the construction phase. Returns self for chaining."""
        if not self._frozen:
            self._adj = {node_id: tuple(neighbors) for node_id, neighbors in self._adj.items()}
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; it cannot be modified after construction")

    # --- Lookup --------------------------------------------------------------

    def get_node(self, node_id: int) -> Node:
        """Get a node by id."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"Node {node_id} not in graph") from None

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def node_at(self, row: int, col: int) -> Node | None:
        """Get the node at a grid position, or None for walls and out-of-range cells."""
        node_id = self._by_position.get((row, col))
        if node_id is None:
            return None
        return self._nodes[node_id]

    def neighbors(self, node_id: int) -> tuple[int, ...]:
        """Neighbor ids in discovery order (empty if the node is unknown)."""
        return tuple(self._adj.get(node_id, ()))

    @property
    def start(self) -> Node | None:
        return self._start

    @property
    def goal(self) -> Node | None:
        return self._goal

    # --- Enumeration ---------------------------------------------------------

    def nodes(self) -> list[Node]:
        """All nodes in creation order."""
        return list(self._nodes.values())

    def node_ids(self) -> list[int]:
        return list(self._nodes)

    def adjacency(self) -> dict[int, tuple[int, ...]]:
        """Copy of the full adjacency mapping."""
        return {node_id: tuple(neighbors) for node_id, neighbors in self._adj.items()}

    def edges(self) -> list[tuple[int, int]]:
        """
        Undirected edges as (min id, max id) pairs.

        Ordered by first discovery while walking the adjacency lists in
        creation order.
        """
        seen: set[tuple[int, int]] = set()
        edges: list[tuple[int, int]] = []
        for origin, neighbors in self._adj.items():
            for neighbor in neighbors:
                key = (min(origin, neighbor), max(origin, neighbor))
                if key not in seen:
                    seen.add(key)
                    edges.append(key)
        return edges

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        # Each undirected edge is listed at both endpoints
        return sum(len(neighbors) for neighbors in self._adj.values()) // 2

    def stats(self) -> dict:
        """Summary counts for the graph."""
        return {
            "nodes": self.node_count,
            "edges": self.edge_count,
            "start": self._start.position if self._start else None,
            "goal": self._goal.position if self._goal else None,
            "frozen": self._frozen,
        }

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
