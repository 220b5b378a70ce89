"""The day 24 puzzle: parse once, answer both parts."""

from __future__ import annotations
from dataclasses import dataclass

from navigator import Itinerary, NavigatorConfig, round_trip, single_trip
from occupancy import Occupancy
from valley import Valley, parse_valley


@dataclass(frozen=True)
class Solution:
    part_one: int
    part_two: int

    def __str__(self) -> str:
        return f"part 1: {self.part_one}\npart 2: {self.part_two}"


class BlizzardBasin:
    DAY = 24
    TITLE = "blizzard basin"

    def __init__(self, valley: Valley, config: NavigatorConfig = NavigatorConfig()):
        self.valley = valley
        self.config = config
        # Shared by both parts so the second reuses phases the first filled in.
        self.occupancy = Occupancy(valley, precompute=config.precompute_occupancy)

    @classmethod
    def from_str(
        cls, text: str, config: NavigatorConfig = NavigatorConfig()
    ) -> BlizzardBasin:
        return cls(parse_valley(text), config)

    @classmethod
    def solve(cls, text: str, config: NavigatorConfig = NavigatorConfig()) -> Solution:
        problem = cls.from_str(text, config)
        return Solution(part_one=problem.part_one(), part_two=problem.part_two())

    def part_one(self) -> int:
        return single_trip(self.valley, self.config, self.occupancy).duration

    def part_two(self) -> int:
        return self.itinerary().total_minutes

    def itinerary(self) -> Itinerary:
        return round_trip(self.valley, self.config, self.occupancy)
