"""Shared types for tick-maze: coordinates, directions and cell codes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WALL = -1
OPEN = 0


class Direction(IntEnum):
    """Unit moves on a 4-connected grid. Opposite directions sum to 3."""

    UP = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3

    @property
    def opposite(self) -> Direction:
        return Direction(3 - self.value)


DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.DOWN,
)

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable (row, col) position. Not bounds-checked."""

    row: int
    col: int

    def move(self, direction: Direction | int) -> Coord:
        try:
            dr, dc = _OFFSETS[Direction(direction)]
        except ValueError:
            raise ValueError(f"Invalid direction: {direction!r}") from None
        return Coord(self.row + dr, self.col + dc)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class MazeFormatError(ValueError):
    """Raised when a maze description cannot be loaded.

    Attributes:
        line: 1-based line number the problem was found on, if any.
        source: Path the text was read from, if any.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        source: str | None = None,
    ) -> None:
        self.line = line
        self.source = source
        prefix = source if source is not None else "<maze>"
        if line is not None:
            prefix = f"{prefix}:{line}"
        super().__init__(f"{prefix}: {message}")
