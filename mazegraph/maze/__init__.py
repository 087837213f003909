"""
Maze loading module.

Provides the grid parser for textual mazes:
- CellMarker: Enum of the four cell kinds
- MazeGrid: Rectangular, immutable character grid
- parse_lines / parse_text / load_maze: Build a validated MazeGrid

Usage:
    from mazegraph.maze import load_maze

    grid = load_maze("data/mazes/sample.txt")
    grid.start, grid.goal
"""

from mazegraph.maze.parser import (
    CellMarker,
    MazeGrid,
    load_maze,
    parse_lines,
    parse_text,
)

__all__ = [
    "CellMarker",
    "MazeGrid",
    "load_maze",
    "parse_lines",
    "parse_text",
]
