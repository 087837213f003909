"""
Grid parser for textual mazes.

A maze is a block of text where:
- '*' is a wall (not traversable)
- ' ' is an open cell
- 'A' is the start
- 'B' is the goal

Ragged lines are right-padded with open cells up to the longest line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from mazegraph.config import FILLER_CHAR, GOAL_CHAR, OPEN_CHAR, START_CHAR, WALL_CHAR
from mazegraph.errors import FormatError

logger = logging.getLogger(__name__)

Position = tuple[int, int]  # (row, col)


class CellMarker(str, Enum):
    """Kind of a grid cell, valued by its character in the maze text."""

    WALL = WALL_CHAR
    OPEN = OPEN_CHAR
    START = START_CHAR
    GOAL = GOAL_CHAR

    @property
    def traversable(self) -> bool:
        return self is not CellMarker.WALL


_MARKERS = {marker.value: marker for marker in CellMarker}


@dataclass(frozen=True)
class MazeGrid:
    """
    Rectangular character grid, immutable once parsed.

    Attributes:
        rows: Number of rows
        columns: Number of columns (length of the longest input line)
        lines: One string per row, each exactly `columns` characters long
        start: Position of the start marker
        goal: Position of the goal marker
    """

    rows: int
    columns: int
    lines: tuple[str, ...]
    start: Position
    goal: Position

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell(self, row: int, col: int) -> CellMarker:
        """Get the marker at (row, col). Unrecognized characters read as OPEN."""
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) out of range [0, {self.rows}) x [0, {self.columns})"
            )
        return _MARKERS.get(self.lines[row][col], CellMarker.OPEN)

    def is_wall(self, row: int, col: int) -> bool:
        return self.lines[row][col] == WALL_CHAR

    def find(self, marker: CellMarker) -> list[Position]:
        """All positions holding `marker`, in row-major order."""
        return [
            (row, col)
            for row, line in enumerate(self.lines)
            for col, char in enumerate(line)
            if char == marker.value
        ]

    def __str__(self) -> str:
        return "\n".join(self.lines)


def parse_lines(lines: Iterable[str]) -> MazeGrid:
    """
    Parse raw maze lines into a validated MazeGrid.

    Trailing newline characters are stripped from each line; shorter lines
    are padded with open cells. Any character other than a wall, start or
    goal marker is an open cell.

    Raises:
        FormatError: If the start or goal marker is missing or appears more
            than once
    """
    raw = [line.rstrip("\r\n") for line in lines]
    columns = max((len(line) for line in raw), default=0)
    padded = tuple(line.ljust(columns, FILLER_CHAR) for line in raw)

    starts: list[Position] = []
    goals: list[Position] = []
    for row, line in enumerate(padded):
        for col, char in enumerate(line):
            if char == START_CHAR:
                starts.append((row, col))
            elif char == GOAL_CHAR:
                goals.append((row, col))

    _check_marker(starts, "start", START_CHAR)
    _check_marker(goals, "goal", GOAL_CHAR)

    return MazeGrid(
        rows=len(padded),
        columns=columns,
        lines=padded,
        start=starts[0],
        goal=goals[0],
    )


def _check_marker(found: list[Position], label: str, char: str) -> None:
    if not found:
        raise FormatError(f"Maze must contain a {label} marker '{char}'")
    if len(found) > 1:
        raise FormatError(
            f"Maze must contain exactly one {label} marker '{char}', found {len(found)} at {found}"
        )


def parse_text(text: str) -> MazeGrid:
    """Parse a maze held in a single string."""
    return parse_lines(text.splitlines())


def load_maze(path: str | Path) -> MazeGrid:
    """
    Read and parse a maze file.

    Args:
        path: Path to a UTF-8 text file (a leading byte order mark is dropped)

    Returns:
        The parsed MazeGrid

    Raises:
        FormatError: If the maze text is malformed
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.info(f"Loading maze from {path}...")
    with open(path, encoding="utf-8-sig") as f:
        grid = parse_lines(f)
    logger.info(f"Loaded {grid.rows}x{grid.columns} maze (start={grid.start}, goal={grid.goal})")
    return grid
