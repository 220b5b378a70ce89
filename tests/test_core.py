"""Tests for core data structures."""

from core import Direction, Pos


class TestManhattanDistance:
    def test_returns_zero_for_same_position(self) -> None:
        p = Pos(5, 5)
        assert p.manhattan_distance(p) == 0

    def test_calculates_diagonal_distance(self) -> None:
        p1 = Pos(0, 0)
        p2 = Pos(3, 4)
        assert p1.manhattan_distance(p2) == 7

    def test_counts_negative_rows(self) -> None:
        assert Pos(0, -1).manhattan_distance(Pos(2, 2)) == 5


class TestDirection:
    def test_parses_input_characters(self) -> None:
        assert Direction("^") is Direction.UP
        assert Direction("v") is Direction.DOWN
        assert Direction("<") is Direction.LEFT
        assert Direction(">") is Direction.RIGHT

    def test_y_grows_downwards(self) -> None:
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)

    def test_only_left_and_right_are_horizontal(self) -> None:
        assert {d for d in Direction if d.is_horizontal} == {Direction.LEFT, Direction.RIGHT}


class TestStep:
    def test_steps_one_cell(self) -> None:
        assert Pos(2, 2).step(Direction.RIGHT) == Pos(3, 2)
        assert Pos(2, 2).step(Direction.UP) == Pos(2, 1)

    def test_neighbors_are_the_four_orthogonal_cells(self) -> None:
        neighbors = Pos(1, 1).neighbors()
        assert len(neighbors) == 4
        assert set(neighbors) == {Pos(1, 0), Pos(1, 2), Pos(0, 1), Pos(2, 1)}
        assert all(n.manhattan_distance(Pos(1, 1)) == 1 for n in neighbors)
