"""Tests for grid geometry: turning, advancing, bounds."""

import pytest

from roverctl.domain.geometry import (
    Coordinates,
    Direction,
    GridSize,
    Instruction,
    advance,
    is_in_bounds,
    turn_left,
    turn_right,
)


class TestEnums:
    def test_direction_letters(self) -> None:
        assert {d.value for d in Direction} == {"N", "E", "S", "W"}

    def test_instruction_letters(self) -> None:
        assert {i.value for i in Instruction} == {"F", "L", "R"}

    def test_lookup_by_letter(self) -> None:
        assert Direction("E") is Direction.EAST
        assert Instruction("L") is Instruction.TURN_LEFT

    def test_unknown_letter_rejected(self) -> None:
        with pytest.raises(ValueError):
            Direction("P")


class TestTurning:
    @pytest.mark.parametrize(
        "start,expected",
        [
            (Direction.NORTH, Direction.EAST),
            (Direction.EAST, Direction.SOUTH),
            (Direction.SOUTH, Direction.WEST),
            (Direction.WEST, Direction.NORTH),
        ],
    )
    def test_turn_right_is_clockwise(self, start: Direction, expected: Direction) -> None:
        assert turn_right(start) is expected

    @pytest.mark.parametrize(
        "start,expected",
        [
            (Direction.NORTH, Direction.WEST),
            (Direction.WEST, Direction.SOUTH),
            (Direction.SOUTH, Direction.EAST),
            (Direction.EAST, Direction.NORTH),
        ],
    )
    def test_turn_left_is_counter_clockwise(self, start: Direction, expected: Direction) -> None:
        assert turn_left(start) is expected

    @pytest.mark.parametrize("direction", list(Direction))
    def test_left_then_right_is_identity(self, direction: Direction) -> None:
        assert turn_right(turn_left(direction)) is direction
        assert turn_left(turn_right(direction)) is direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_four_turns_return_to_start(self, direction: Direction) -> None:
        right = left = direction
        for _ in range(4):
            right = turn_right(right)
            left = turn_left(left)
        assert right is direction
        assert left is direction


class TestAdvance:
    @pytest.mark.parametrize(
        "direction,expected",
        [
            (Direction.NORTH, Coordinates(2, 3)),
            (Direction.SOUTH, Coordinates(2, 1)),
            (Direction.EAST, Coordinates(3, 2)),
            (Direction.WEST, Coordinates(1, 2)),
        ],
    )
    def test_one_step(self, direction: Direction, expected: Coordinates) -> None:
        assert advance(Coordinates(2, 2), direction) == expected

    def test_no_bounds_checking(self) -> None:
        assert advance(Coordinates(0, 0), Direction.WEST) == Coordinates(-1, 0)


class TestIsInBounds:
    grid = GridSize(width=4, height=8)

    @pytest.mark.parametrize(
        "coords",
        [Coordinates(0, 0), Coordinates(4, 8), Coordinates(4, 0), Coordinates(0, 8)],
    )
    def test_edges_are_inclusive(self, coords: Coordinates) -> None:
        assert is_in_bounds(coords, self.grid)

    @pytest.mark.parametrize(
        "coords",
        [Coordinates(-1, 0), Coordinates(0, -1), Coordinates(5, 0), Coordinates(0, 9)],
    )
    def test_outside(self, coords: Coordinates) -> None:
        assert not is_in_bounds(coords, self.grid)

    def test_width_bounds_x_and_height_bounds_y(self) -> None:
        assert is_in_bounds(Coordinates(4, 8), self.grid)
        assert not is_in_bounds(Coordinates(8, 4), self.grid)

    def test_zero_grid_has_one_cell(self) -> None:
        assert is_in_bounds(Coordinates(0, 0), GridSize(0, 0))
        assert not is_in_bounds(Coordinates(1, 0), GridSize(0, 0))
