"""Core data structures and utilities."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


Timestamp = int


class BlizzardBasinError(Exception):
    """Base class for every error raised while reading or navigating a valley."""


class Direction(Enum):
    """Heading of a blizzard, keyed by its character in the puzzle input."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) of one step, with y growing downwards."""
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def manhattan_distance(self, other: Pos) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def step(self, direction: Direction) -> Pos:
        dx, dy = direction.delta
        return Pos(self.x + dx, self.y + dy)

    def neighbors(self) -> list[Pos]:
        """Return the four orthogonal neighbors, in Direction order."""
        return [self.step(direction) for direction in Direction]
