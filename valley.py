"""Valley model: walls, openings and blizzards parsed from puzzle input."""

from __future__ import annotations
from dataclasses import dataclass
from math import lcm

from core import BlizzardBasinError, Direction, Pos


WALL = "#"
GROUND = "."
BLIZZARD_CHARS = frozenset(direction.value for direction in Direction)


class ParseError(BlizzardBasinError, ValueError):
    """The input text does not describe a valid valley."""


@dataclass(frozen=True)
class Blizzard:
    """A blizzard as it stands at minute 0."""

    pos: Pos
    direction: Direction


@dataclass(frozen=True)
class Valley:
    """The walled valley, in interior coordinates.

    (0, 0) is the top-left interior cell. The start opening sits just above the
    interior at y == -1 and the goal opening just below it at y == height.
    """

    width: int
    height: int
    start: Pos
    goal: Pos
    blizzards: tuple[Blizzard, ...]

    @property
    def cycle_length(self) -> int:
        """Minutes after which every blizzard is back where it started."""
        return lcm(self.width, self.height)

    @property
    def state_count(self) -> int:
        """Number of distinct (position, phase) search states."""
        return (self.width * self.height + 2) * self.cycle_length

    def in_interior(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_opening(self, pos: Pos) -> bool:
        return pos == self.start or pos == self.goal

    def is_walkable(self, pos: Pos) -> bool:
        """Whether the expedition may ever stand here (ignoring blizzards)."""
        return self.in_interior(pos) or self.is_opening(pos)


def _find_opening(row: str, row_index: int) -> int:
    """Return the interior column of the single opening in a wall row."""
    openings = []
    for col, ch in enumerate(row):
        if ch == GROUND:
            openings.append(col)
        elif ch != WALL:
            raise ParseError(f"row {row_index}: unexpected {ch!r} in wall row")
    if len(openings) != 1:
        raise ParseError(
            f"row {row_index}: expected exactly one opening, found {len(openings)}"
        )
    col = openings[0]
    if col == 0 or col == len(row) - 1:
        raise ParseError(f"row {row_index}: opening at column {col} is in a corner")
    return col - 1


def parse_valley(text: str) -> Valley:
    """Parse the puzzle input into a Valley.

    Raises:
        ParseError: if the grid is malformed (ragged rows, missing side walls,
            unknown characters, or not exactly one opening in the top and
            bottom rows).
    """
    lines = [line.rstrip() for line in text.strip().splitlines()]
    if len(lines) < 3:
        raise ParseError(f"expected at least 3 rows, found {len(lines)}")

    full_width = len(lines[0])
    if full_width < 3:
        raise ParseError(f"expected rows at least 3 wide, found {full_width}")
    for row_index, line in enumerate(lines):
        if len(line) != full_width:
            raise ParseError(
                f"row {row_index}: width {len(line)} does not match width {full_width} of row 0"
            )

    start_x = _find_opening(lines[0], 0)
    goal_x = _find_opening(lines[-1], len(lines) - 1)

    blizzards: list[Blizzard] = []
    for row_index, line in enumerate(lines[1:-1], start=1):
        if line[0] != WALL or line[-1] != WALL:
            raise ParseError(f"row {row_index}: missing side wall")
        for col, ch in enumerate(line[1:-1], start=1):
            if ch == GROUND:
                continue
            if ch in BLIZZARD_CHARS:
                blizzards.append(Blizzard(Pos(col - 1, row_index - 1), Direction(ch)))
            elif ch == WALL:
                raise ParseError(f"row {row_index}: wall at column {col} inside the valley")
            else:
                raise ParseError(f"row {row_index}: unrecognized character {ch!r}")

    height = len(lines) - 2
    return Valley(
        width=full_width - 2,
        height=height,
        start=Pos(start_x, -1),
        goal=Pos(goal_x, height),
        blizzards=tuple(blizzards),
    )
