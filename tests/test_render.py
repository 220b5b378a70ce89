"""Tests for text snapshots."""

from core import Direction, Pos
from navigator import single_trip
from render import render_snapshot, render_trip
from valley import Blizzard, Valley
from test_utils import EXAMPLE_VALLEY, OPEN_VALLEY, make_valley


MINUTE_ONE = """\
#.######
#E>3.<.#
#<..<<.#
#>2.22.#
#>v..^<#
######.#"""


class TestRenderSnapshot:
    def test_minute_zero_reproduces_the_input(self) -> None:
        assert render_snapshot(make_valley(), 0) == EXAMPLE_VALLEY.strip()

    def test_draws_stacked_blizzards_as_counts(self) -> None:
        assert render_snapshot(make_valley(), 1, expedition=Pos(0, 0)) == MINUTE_ONE

    def test_draws_expedition_on_an_opening(self) -> None:
        valley = make_valley()
        first_row = render_snapshot(valley, 0, expedition=valley.start).splitlines()[0]
        assert first_row == "#E######"

    def test_repeats_after_one_cycle(self) -> None:
        valley = make_valley()
        assert render_snapshot(valley, 5) == render_snapshot(valley, 5 + valley.cycle_length)

    def test_marks_ten_or_more_blizzards_with_a_star(self) -> None:
        def pile(count: int) -> Valley:
            blizzards = tuple(Blizzard(Pos(0, 0), Direction.UP) for _ in range(count))
            return Valley(1, 1, Pos(0, -1), Pos(0, 1), blizzards)

        assert render_snapshot(pile(9), 0).splitlines()[1] == "#9#"
        assert render_snapshot(pile(10), 0).splitlines()[1] == "#*#"


class TestRenderTrip:
    def test_one_frame_per_minute(self) -> None:
        valley = make_valley(OPEN_VALLEY)
        trip = single_trip(valley)
        frames = render_trip(valley, trip).split("\n\n")
        assert len(frames) == trip.duration + 1
        assert frames[0].startswith("Minute 0:\n#E###")
        assert frames[-1].endswith("###E#")
