"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from mazegraph.graph import Graph, build_graph
from mazegraph.maze import MazeGrid, parse_lines


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mazes_dir(project_root: Path) -> Path:
    """Return the bundled mazes directory."""
    return project_root / "data" / "mazes"


@pytest.fixture
def ring_lines() -> list[str]:
    """
    3x3 maze with a wall in the middle.

    Node ids (row-major):
        0 1 2
        3 * 4
        5 6 7
    A is node 0, B is node 7.
    """
    return ["A  ", " * ", "  B"]


@pytest.fixture
def ring_grid(ring_lines: list[str]) -> MazeGrid:
    return parse_lines(ring_lines)


@pytest.fixture
def ring_graph(ring_grid: MazeGrid) -> Graph:
    return build_graph(ring_grid)


@pytest.fixture
def pair_graph() -> Graph:
    """Two adjacent nodes: A (id 0) next to B (id 1)."""
    return build_graph(parse_lines(["AB"]))


@pytest.fixture
def open_lines() -> list[str]:
    """
    3x3 maze with no walls.

    Node ids (row-major):
        0 1 2
        3 4 5
        6 7 8
    """
    return ["A  ", "   ", "  B"]


@pytest.fixture
def blocked_lines() -> list[str]:
    """Maze where B is walled off from A."""
    return [
        "*******",
        "*A  * *",
        "*   *B*",
        "*******",
    ]


@pytest.fixture
def sample_lines() -> list[str]:
    """Larger maze with dead ends and a single route from A to B."""
    return [
        "***********",
        "*A    *   *",
        "* *** * * *",
        "* *   * * *",
        "* * *** * *",
        "*       *B*",
        "***********",
    ]


@pytest.fixture
def sample_graph(sample_lines: list[str]) -> Graph:
    return build_graph(parse_lines(sample_lines))
