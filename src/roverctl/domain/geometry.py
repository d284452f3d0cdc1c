"""Grid geometry — directions, instructions, coordinates and bounds.

Pure value logic with no dependencies. Every value here is immutable;
moving or turning a rover always produces a new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Compass direction a rover can face, keyed by its input letter."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Instruction(StrEnum):
    """Single movement instruction, keyed by its input letter."""

    FORWARD = "F"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"


# Clockwise order; turning is an index shift of +1 (right) or -1 (left).
_COMPASS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Coordinates:
    """A point on the grid. Validity is relative to a :class:`GridSize`."""

    x: int
    y: int


@dataclass(frozen=True)
class GridSize:
    """Inclusive maxima for the grid: valid points are [0, width] x [0, height]."""

    width: int
    height: int


@dataclass(frozen=True)
class RoverPosition:
    """Where a rover is and which way it faces."""

    coordinates: Coordinates
    direction: Direction


def turn_right(direction: Direction) -> Direction:
    """Rotate 90 degrees clockwise."""
    return _COMPASS[(_COMPASS.index(direction) + 1) % len(_COMPASS)]


def turn_left(direction: Direction) -> Direction:
    """Rotate 90 degrees counter-clockwise."""
    return _COMPASS[(_COMPASS.index(direction) - 1) % len(_COMPASS)]


def advance(coordinates: Coordinates, direction: Direction) -> Coordinates:
    """Shift *coordinates* one unit towards *direction*. No bounds checking."""
    dx, dy = _STEPS[direction]
    return Coordinates(coordinates.x + dx, coordinates.y + dy)


def is_in_bounds(coordinates: Coordinates, grid: GridSize) -> bool:
    """Check ``0 <= x <= width`` and ``0 <= y <= height``."""
    return 0 <= coordinates.x <= grid.width and 0 <= coordinates.y <= grid.height
