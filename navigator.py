"""Shortest paths through the valley while the blizzards move.

The search is breadth-first over (position, phase) states, one layer per
minute. Occupancy repeats every `cycle_length` minutes, so a position reached
again at the same phase can never finish sooner than the first arrival, and the
visited set stays bounded by `Valley.state_count`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence

from core import BlizzardBasinError, Pos, Timestamp
from occupancy import Occupancy
from valley import Valley


logger = logging.getLogger(__name__)


class SearchExhaustedError(BlizzardBasinError):
    """Every reachable state was explored without reaching the goal."""


class SearchAbortedError(BlizzardBasinError):
    """The search hit its expansion cap before finishing."""


@dataclass(frozen=True)
class NavigatorConfig:
    """Knobs for the search."""

    precompute_occupancy: bool = False
    # None means the valley's full state count.
    max_expansions: int | None = None


@dataclass(frozen=True)
class Trip:
    """One leg: where the expedition stands each minute, starting at `start_minute`."""

    start: Pos
    goal: Pos
    start_minute: Timestamp
    path: tuple[Pos, ...]

    @property
    def duration(self) -> int:
        return len(self.path) - 1

    @property
    def end_minute(self) -> Timestamp:
        return self.start_minute + self.duration

    def position_at(self, minute: Timestamp) -> Pos | None:
        if not self.start_minute <= minute <= self.end_minute:
            return None
        return self.path[minute - self.start_minute]


@dataclass(frozen=True)
class Itinerary:
    """Consecutive legs, each starting the minute the previous one ended."""

    legs: tuple[Trip, ...]

    @property
    def total_minutes(self) -> int:
        return sum(leg.duration for leg in self.legs)

    @property
    def start_minute(self) -> Timestamp:
        return self.legs[0].start_minute if self.legs else 0

    @property
    def end_minute(self) -> Timestamp:
        return self.legs[-1].end_minute if self.legs else 0

    def position_at(self, minute: Timestamp) -> Pos | None:
        for leg in self.legs:
            pos = leg.position_at(minute)
            if pos is not None:
                return pos
        return None


def candidate_moves(valley: Valley, pos: Pos) -> list[Pos]:
    """Wait or step orthogonally, staying inside the interior or on an opening."""
    return [p for p in [pos, *pos.neighbors()] if valley.is_walkable(p)]


def find_trip(
    valley: Valley,
    start: Pos,
    goal: Pos,
    start_minute: Timestamp = 0,
    occupancy: Occupancy | None = None,
    max_expansions: int | None = None,
) -> Trip:
    """Find a fastest way from `start` to `goal`, leaving at `start_minute`.

    Raises:
        ValueError: if `start` or `goal` is not walkable, or `start` is covered
            by a blizzard at `start_minute`.
        SearchExhaustedError: if the goal cannot be reached.
        SearchAbortedError: if more than `max_expansions` states are expanded.
    """
    if occupancy is None:
        occupancy = Occupancy(valley)
    for pos in (start, goal):
        if not valley.is_walkable(pos):
            raise ValueError(f"({pos.x}, {pos.y}) is not inside the valley")
    if occupancy.is_occupied(start, start_minute):
        raise ValueError(
            f"({start.x}, {start.y}) is covered by a blizzard at minute {start_minute}"
        )

    cycle = valley.cycle_length
    limit = valley.state_count if max_expansions is None else max_expansions
    logger.debug(
        "searching (%d, %d) -> (%d, %d) from minute %d",
        start.x, start.y, goal.x, goal.y, start_minute,
    )

    if start == goal:
        return Trip(start, goal, start_minute, (start,))

    # (position, phase) -> position one minute earlier; doubles as the visited set
    came_from: dict[tuple[Pos, int], Pos | None] = {
        (start, start_minute % cycle): None
    }
    frontier = [start]
    expansions = 0
    minute = start_minute

    while frontier:
        minute += 1
        phase = minute % cycle
        next_frontier: list[Pos] = []
        for pos in frontier:
            expansions += 1
            if expansions > limit:
                raise SearchAbortedError(
                    f"gave up after {limit} expansions at minute {minute - 1}"
                )
            for candidate in candidate_moves(valley, pos):
                key = (candidate, phase)
                if key in came_from or occupancy.is_occupied(candidate, minute):
                    continue
                came_from[key] = pos
                if candidate == goal:
                    path = _reconstruct_path(came_from, goal, phase, cycle)
                    logger.info(
                        "reached (%d, %d) in %d minutes after %d expansions",
                        goal.x, goal.y, len(path) - 1, expansions,
                    )
                    return Trip(start, goal, start_minute, path)
                next_frontier.append(candidate)
        frontier = next_frontier

    raise SearchExhaustedError(
        f"no path from ({start.x}, {start.y}) to ({goal.x}, {goal.y}) "
        f"leaving at minute {start_minute} ({expansions} states explored)"
    )


def _reconstruct_path(
    came_from: dict[tuple[Pos, int], Pos | None],
    goal: Pos,
    phase: int,
    cycle: int,
) -> tuple[Pos, ...]:
    path = [goal]
    previous = came_from[(goal, phase)]
    while previous is not None:
        path.append(previous)
        phase = (phase - 1) % cycle
        previous = came_from[(previous, phase)]
    path.reverse()
    return tuple(path)


def plan_itinerary(
    valley: Valley,
    waypoints: Sequence[Pos],
    start_minute: Timestamp = 0,
    occupancy: Occupancy | None = None,
    max_expansions: int | None = None,
) -> Itinerary:
    """Visit the waypoints in order, each leg leaving when the last one arrives."""
    if occupancy is None:
        occupancy = Occupancy(valley)
    legs: list[Trip] = []
    minute = start_minute
    for leg_start, leg_goal in zip(waypoints, waypoints[1:]):
        trip = find_trip(
            valley,
            leg_start,
            leg_goal,
            start_minute=minute,
            occupancy=occupancy,
            max_expansions=max_expansions,
        )
        legs.append(trip)
        minute = trip.end_minute
    return Itinerary(tuple(legs))


def single_trip(
    valley: Valley,
    config: NavigatorConfig = NavigatorConfig(),
    occupancy: Occupancy | None = None,
) -> Trip:
    """Fastest way from the start opening to the goal opening at minute 0."""
    if occupancy is None:
        occupancy = Occupancy(valley, precompute=config.precompute_occupancy)
    return find_trip(
        valley,
        valley.start,
        valley.goal,
        occupancy=occupancy,
        max_expansions=config.max_expansions,
    )


def round_trip(
    valley: Valley,
    config: NavigatorConfig = NavigatorConfig(),
    occupancy: Occupancy | None = None,
) -> Itinerary:
    """Start -> goal -> start -> goal, for the snacks someone left behind."""
    if occupancy is None:
        occupancy = Occupancy(valley, precompute=config.precompute_occupancy)
    return plan_itinerary(
        valley,
        [valley.start, valley.goal, valley.start, valley.goal],
        occupancy=occupancy,
        max_expansions=config.max_expansions,
    )


def verify_trip(valley: Valley, trip: Trip, occupancy: Occupancy) -> None:
    """Replay a trip minute by minute.

    Raises:
        ValueError: on the first illegal step (a wall, a jump, or a blizzard).
    """
    if not trip.path or trip.path[0] != trip.start or trip.path[-1] != trip.goal:
        raise ValueError("trip does not run from its start to its goal")
    for offset, pos in enumerate(trip.path):
        minute = trip.start_minute + offset
        if not valley.is_walkable(pos):
            raise ValueError(f"minute {minute}: ({pos.x}, {pos.y}) is a wall")
        if occupancy.is_occupied(pos, minute):
            raise ValueError(f"minute {minute}: ({pos.x}, {pos.y}) is in a blizzard")
        if offset > 0 and trip.path[offset - 1].manhattan_distance(pos) > 1:
            raise ValueError(f"minute {minute}: ({pos.x}, {pos.y}) is not adjacent")
