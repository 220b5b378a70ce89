"""Text snapshots of the valley in the puzzle's own notation."""

from __future__ import annotations

from core import Direction, Pos, Timestamp
from navigator import Trip
from occupancy import Occupancy
from valley import GROUND, WALL, Valley


EXPEDITION = "E"


def _cell_char(directions: list[Direction] | None) -> str:
    if not directions:
        return GROUND
    if len(directions) == 1:
        return directions[0].value
    return str(len(directions)) if len(directions) < 10 else "*"


def render_snapshot(
    valley: Valley,
    minute: Timestamp,
    expedition: Pos | None = None,
    occupancy: Occupancy | None = None,
) -> str:
    """Draw the valley at `minute`, optionally with the expedition as `E`.

    Stacked blizzards are drawn as their count (`*` for ten or more).
    """
    if occupancy is None:
        occupancy = Occupancy(valley)
    cells = occupancy.blizzards_at(minute)

    rows: list[str] = []
    for y in range(-1, valley.height + 1):
        row = [WALL]
        for x in range(valley.width):
            pos = Pos(x, y)
            if pos == expedition:
                row.append(EXPEDITION)
            elif valley.in_interior(pos) or valley.is_opening(pos):
                row.append(_cell_char(cells.get(pos)))
            else:
                row.append(WALL)
        row.append(WALL)
        rows.append("".join(row))
    return "\n".join(rows)


def render_trip(valley: Valley, trip: Trip, occupancy: Occupancy | None = None) -> str:
    """One snapshot per minute of the trip, each under a `Minute N:` heading."""
    if occupancy is None:
        occupancy = Occupancy(valley)
    frames = []
    for offset, pos in enumerate(trip.path):
        minute = trip.start_minute + offset
        snapshot = render_snapshot(valley, minute, expedition=pos, occupancy=occupancy)
        frames.append(f"Minute {minute}:\n{snapshot}")
    return "\n\n".join(frames)
