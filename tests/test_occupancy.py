"""Tests for blizzard positions and the occupancy table."""

import numpy as np
import pytest

from core import Direction, Pos
from occupancy import Occupancy, blizzard_position
from valley import Blizzard
from test_utils import (
    BLOCKED_VALLEY,
    OPEN_VALLEY,
    make_valley,
    simulate_occupancy,
    simulate_step,
)


class TestBlizzardPosition:
    @pytest.mark.parametrize(
        "direction,minute,expected",
        [
            (Direction.RIGHT, 1, Pos(3, 1)),
            (Direction.RIGHT, 4, Pos(0, 1)),
            (Direction.LEFT, 3, Pos(5, 1)),
            (Direction.DOWN, 2, Pos(2, 3)),
            (Direction.DOWN, 3, Pos(2, 0)),
            (Direction.UP, 2, Pos(2, 3)),
        ],
    )
    def test_wraps_inside_the_interior(
        self, direction: Direction, minute: int, expected: Pos
    ) -> None:
        blizzard = Blizzard(Pos(2, 1), direction)
        assert blizzard_position(blizzard, minute, width=6, height=4) == expected

    def test_returns_to_start_after_one_lap(self) -> None:
        blizzard = Blizzard(Pos(2, 1), Direction.LEFT)
        assert blizzard_position(blizzard, 6, width=6, height=4) == Pos(2, 1)


class TestOccupancy:
    def test_minute_zero_matches_input(self) -> None:
        valley = make_valley()
        occupancy = Occupancy(valley)
        assert occupancy.occupied_at(0) == frozenset(b.pos for b in valley.blizzards)

    def test_matches_step_by_step_simulation(self) -> None:
        valley = make_valley()
        occupancy = Occupancy(valley)
        minutes = 4 * valley.cycle_length
        for minute, expected in enumerate(simulate_occupancy(valley, minutes)):
            assert occupancy.occupied_at(minute) == expected, f"minute {minute}"

    def test_closed_form_matches_simulation_per_blizzard(self) -> None:
        valley = make_valley()
        positions = [b.pos for b in valley.blizzards]
        headings = [b.direction.value for b in valley.blizzards]
        for minute in range(4 * valley.cycle_length + 1):
            for blizzard, pos in zip(valley.blizzards, positions):
                assert blizzard_position(blizzard, minute, valley.width, valley.height) == pos
            positions = simulate_step(valley, positions, headings)

    def test_is_periodic_in_cycle_length(self) -> None:
        valley = make_valley()
        occupancy = Occupancy(valley)
        cycle = valley.cycle_length
        for minute in range(cycle):
            assert occupancy.occupied_at(minute) == occupancy.occupied_at(minute + cycle)

    def test_precomputed_table_matches_lazy_table(self) -> None:
        valley = make_valley()
        lazy = Occupancy(valley)
        eager = Occupancy(valley, precompute=True)
        for minute in range(valley.cycle_length):
            assert np.array_equal(lazy.grid_at(minute), eager.grid_at(minute))

    def test_grid_at_is_a_copy(self) -> None:
        occupancy = Occupancy(make_valley())
        grid = occupancy.grid_at(0)
        grid[:] = False
        assert occupancy.is_occupied(Pos(0, 0), 0)

    def test_is_occupied(self) -> None:
        occupancy = Occupancy(make_valley())
        assert occupancy.is_occupied(Pos(0, 0), 0)
        assert not occupancy.is_occupied(Pos(2, 0), 0)
        # Three blizzards meet here at minute 1; membership is still just True.
        assert occupancy.is_occupied(Pos(2, 0), 1)

    def test_openings_are_never_occupied(self) -> None:
        valley = make_valley()
        occupancy = Occupancy(valley, precompute=True)
        for minute in range(valley.cycle_length):
            assert not occupancy.is_occupied(valley.start, minute)
            assert not occupancy.is_occupied(valley.goal, minute)

    def test_stacked_blizzards_are_all_reported(self) -> None:
        occupancy = Occupancy(make_valley())
        directions = occupancy.blizzards_at(1)[Pos(2, 0)]
        assert sorted(d.value for d in directions) == sorted([">", "<", "v"])

    def test_blocked_valley_is_always_full(self) -> None:
        valley = make_valley(BLOCKED_VALLEY)
        occupancy = Occupancy(valley)
        for minute in range(10):
            assert occupancy.occupied_at(minute) == {Pos(0, 0), Pos(1, 0)}

    def test_valley_without_blizzards(self) -> None:
        valley = make_valley(OPEN_VALLEY)
        occupancy = Occupancy(valley, precompute=True)
        assert occupancy.occupied_at(0) == frozenset()
        assert occupancy.blizzards_at(3) == {}
