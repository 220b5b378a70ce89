"""Where the blizzards are at any minute.

Every blizzard travels a ring of `width` cells (horizontal) or `height` cells
(vertical), so its position has a closed form and the whole configuration
repeats every `lcm(width, height)` minutes. The occupancy table stores one
boolean grid per phase in that cycle.
"""

from __future__ import annotations

import numpy as np

from core import Direction, Pos, Timestamp
from valley import Blizzard, Valley


def blizzard_position(
    blizzard: Blizzard, minute: Timestamp, width: int, height: int
) -> Pos:
    """Position of a blizzard after `minute` minutes, wrapping inside the interior."""
    dx, dy = blizzard.direction.delta
    return Pos(
        (blizzard.pos.x + dx * minute) % width,
        (blizzard.pos.y + dy * minute) % height,
    )


class Occupancy:
    """Periodic occupancy table for one valley.

    Phases are filled lazily the first time they are queried, or all at once
    with `precompute()`. Either way the table for phase p is the set of cells
    covered by at least one blizzard at any minute t with t % cycle_length == p.
    """

    def __init__(self, valley: Valley, precompute: bool = False) -> None:
        self.valley = valley
        self.cycle_length = valley.cycle_length
        self._table = np.zeros(
            (self.cycle_length, valley.height, valley.width), dtype=bool
        )
        self._filled = np.zeros(self.cycle_length, dtype=bool)

        blizzards = valley.blizzards
        self._x0 = np.array([b.pos.x for b in blizzards], dtype=np.int64)
        self._y0 = np.array([b.pos.y for b in blizzards], dtype=np.int64)
        self._dx = np.array([b.direction.delta[0] for b in blizzards], dtype=np.int64)
        self._dy = np.array([b.direction.delta[1] for b in blizzards], dtype=np.int64)

        if precompute:
            self.precompute()

    def precompute(self) -> None:
        """Fill the table for every phase in one vectorised pass."""
        phases = np.arange(self.cycle_length, dtype=np.int64)[:, np.newaxis]
        xs = (self._x0 + self._dx * phases) % self.valley.width
        ys = (self._y0 + self._dy * phases) % self.valley.height
        self._table[np.broadcast_to(phases, xs.shape), ys, xs] = True
        self._filled[:] = True

    def phase(self, minute: Timestamp) -> int:
        return minute % self.cycle_length

    def _grid(self, phase: int) -> np.ndarray:
        if not self._filled[phase]:
            xs = (self._x0 + self._dx * phase) % self.valley.width
            ys = (self._y0 + self._dy * phase) % self.valley.height
            self._table[phase, ys, xs] = True
            self._filled[phase] = True
        return self._table[phase]

    def grid_at(self, minute: Timestamp) -> np.ndarray:
        """Boolean (height, width) grid of occupied cells. Returns a copy."""
        return self._grid(self.phase(minute)).copy()

    def is_occupied(self, pos: Pos, minute: Timestamp) -> bool:
        """Whether a blizzard covers `pos` at `minute`. Openings are never covered."""
        if not self.valley.in_interior(pos):
            return False
        return bool(self._grid(self.phase(minute))[pos.y, pos.x])

    def occupied_at(self, minute: Timestamp) -> frozenset[Pos]:
        ys, xs = np.nonzero(self._grid(self.phase(minute)))
        return frozenset(Pos(int(x), int(y)) for y, x in zip(ys, xs))

    def blizzards_at(self, minute: Timestamp) -> dict[Pos, list[Direction]]:
        """Directions of all blizzards in each covered cell, from the closed form."""
        cells: dict[Pos, list[Direction]] = {}
        for blizzard in self.valley.blizzards:
            pos = blizzard_position(
                blizzard, minute, self.valley.width, self.valley.height
            )
            cells.setdefault(pos, []).append(blizzard.direction)
        return cells
