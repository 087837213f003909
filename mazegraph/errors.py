"""
Exception types raised by the maze graph package.

Unreachable goals are not errors: searches return an empty sequence.
"""


class MazeError(Exception):
    """Base class for all maze graph errors."""


class FormatError(MazeError, ValueError):
    """
    The maze text is malformed.

    Raised at parse time when the start or goal marker is missing or
    duplicated.
    """


class GraphFrozenError(MazeError, RuntimeError):
    """A graph was mutated after its construction phase ended."""
