"""Typed failures raised by maze generation, path finding and loading."""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for every error this project raises on bad input."""


class InvalidDimensions(MazeError):
    """``generate`` was called with a cell grid it cannot build."""


class InvalidBoard(MazeError):
    """A board whose dimensions are not both odd was handed to the path finder."""


class InvalidSource(MazeError):
    """A shortest-path source that is not a cell centre."""


class InconsistentRowWidth(MazeError):
    def __init__(self, expected: int, got: int, row: int):
        super().__init__(
            f"All rows in a maze must have the same length. "
            f"Expected width: {expected} Got width: {got} (row {row})"
        )
        self.expected = expected
        self.got = got
        self.row = row


class MultipleStartPoints(MazeError):
    def __init__(self):
        super().__init__("Maze cannot have multiple start points")


class MultipleEndPoints(MazeError):
    def __init__(self):
        super().__init__("Maze cannot have multiple end points")


class InvalidTile(MazeError):
    def __init__(self, char: str):
        super().__init__(f"Invalid maze tile: {char!r}")
        self.char = char
