from core import Pos
from valley import Valley, parse_valley


EXAMPLE_VALLEY = """\
#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""

# Two left-moving blizzards chase each other round a two-cell ring, so the
# only interior row is always full.
BLOCKED_VALLEY = """\
#.##
#<<#
##.#
"""

# A single cell whose blizzard wraps onto itself every minute.
STUCK_VALLEY = """\
#.#
#^#
#.#
"""

OPEN_VALLEY = """\
#.###
#...#
#...#
###.#
"""


def make_valley(text: str = EXAMPLE_VALLEY) -> Valley:
    return parse_valley(text)


def simulate_step(valley: Valley, positions: list[Pos], headings: list[str]) -> list[Pos]:
    """Move every blizzard one cell, wrapping to the far wall. Reference for tests."""
    moved = []
    for pos, heading in zip(positions, headings):
        x, y = pos.x, pos.y
        if heading == ">":
            x = 0 if x == valley.width - 1 else x + 1
        elif heading == "<":
            x = valley.width - 1 if x == 0 else x - 1
        elif heading == "v":
            y = 0 if y == valley.height - 1 else y + 1
        elif heading == "^":
            y = valley.height - 1 if y == 0 else y - 1
        moved.append(Pos(x, y))
    return moved


def simulate_occupancy(valley: Valley, minutes: int) -> list[frozenset[Pos]]:
    """Occupied cells for minutes 0..minutes, by stepping one minute at a time."""
    positions = [b.pos for b in valley.blizzards]
    headings = [b.direction.value for b in valley.blizzards]
    snapshots = [frozenset(positions)]
    for _ in range(minutes):
        positions = simulate_step(valley, positions, headings)
        snapshots.append(frozenset(positions))
    return snapshots
