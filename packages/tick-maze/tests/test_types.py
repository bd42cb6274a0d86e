"""Tests for Coord, Direction and MazeFormatError."""
from __future__ import annotations

import pytest

from tick_maze.types import DIRECTIONS, Coord, Direction, MazeFormatError


class TestCoordConstruction:
    def test_fields(self) -> None:
        c = Coord(2, 5)
        assert c.row == 2
        assert c.col == 5

    def test_equality_by_value(self) -> None:
        assert Coord(1, 1) == Coord(1, 1)
        assert Coord(1, 1) != Coord(1, 2)

    def test_hashable(self) -> None:
        assert len({Coord(0, 0), Coord(0, 0), Coord(0, 1)}) == 2

    def test_frozen(self) -> None:
        c = Coord(0, 0)
        with pytest.raises(AttributeError):
            c.row = 3  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Coord(3, 4)) == "(3, 4)"


class TestCoordMove:
    def test_up(self) -> None:
        assert Coord(2, 2).move(Direction.UP) == Coord(1, 2)

    def test_left(self) -> None:
        assert Coord(2, 2).move(Direction.LEFT) == Coord(2, 1)

    def test_right(self) -> None:
        assert Coord(2, 2).move(Direction.RIGHT) == Coord(2, 3)

    def test_down(self) -> None:
        assert Coord(2, 2).move(Direction.DOWN) == Coord(3, 2)

    def test_accepts_int_codes(self) -> None:
        c = Coord(5, 5)
        assert [c.move(i) for i in range(4)] == [
            Coord(4, 5), Coord(5, 4), Coord(5, 6), Coord(6, 5),
        ]

    def test_returns_new_coord(self) -> None:
        c = Coord(1, 1)
        moved = c.move(Direction.DOWN)
        assert moved is not c
        assert c == Coord(1, 1)

    def test_no_bounds_checking(self) -> None:
        assert Coord(0, 0).move(Direction.UP) == Coord(-1, 0)
        assert Coord(0, 0).move(Direction.LEFT) == Coord(0, -1)

    @pytest.mark.parametrize("code", [-1, 4, 99])
    def test_invalid_direction_raises(self, code: int) -> None:
        with pytest.raises(ValueError, match="Invalid direction"):
            Coord(0, 0).move(code)

    def test_move_then_opposite_returns_home(self) -> None:
        c = Coord(3, 3)
        for d in DIRECTIONS:
            assert c.move(d).move(d.opposite) == c


class TestDirection:
    def test_codes(self) -> None:
        assert [int(d) for d in DIRECTIONS] == [0, 1, 2, 3]
        assert DIRECTIONS == (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)

    def test_opposites_sum_to_three(self) -> None:
        for d in DIRECTIONS:
            assert d + d.opposite == 3

    def test_opposite_pairs(self) -> None:
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT


class TestMazeFormatError:
    def test_is_value_error(self) -> None:
        assert issubclass(MazeFormatError, ValueError)

    def test_message_with_line_and_source(self) -> None:
        err = MazeFormatError("bad row", line=3, source="m.txt")
        assert str(err) == "m.txt:3: bad row"
        assert err.line == 3
        assert err.source == "m.txt"

    def test_message_without_location(self) -> None:
        err = MazeFormatError("empty")
        assert str(err) == "<maze>: empty"
        assert err.line is None
        assert err.source is None
