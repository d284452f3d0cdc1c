"""Descriptor parsing — raw text lines into typed grid and rover descriptors.

Pure functions, no I/O. Failures raise subclasses of
:class:`~roverctl.domain.errors.RoverInputError`; the service layer turns
them into ``ServiceResult`` errors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from roverctl.domain.errors import (
    BadGridSizeError,
    InvalidRoverDetailsError,
    OutOfBoundsRoverError,
)
from roverctl.domain.geometry import (
    Coordinates,
    Direction,
    GridSize,
    Instruction,
    RoverPosition,
    is_in_bounds,
)

# (x, y, D) INSTRUCTIONS — coordinates may be negative, letters are validated later.
_ROVER_PATTERN = re.compile(r"\((-?\d+), (-?\d+), (\w)\) (\w+)", re.ASCII)
_INT_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)

# Signed 32-bit range; larger values are a format error, not an out-of-bounds one.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class RoverDescriptor:
    """Starting position and the ordered instructions for one rover."""

    position: RoverPosition
    instructions: tuple[Instruction, ...]


@dataclass(frozen=True)
class SimulationSetup:
    """Grid size plus every rover to simulate, in input order."""

    grid: GridSize
    rovers: tuple[RoverDescriptor, ...]


def _to_int(token: str) -> int | None:
    """Return *token* as an int, or None if it is not a 32-bit integer."""
    if not _INT_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def parse_grid_size(line: str) -> GridSize:
    """Parse ``"<height> <width>"`` into a :class:`GridSize`.

    The first token bounds y and the second bounds x, so ``"4 8"`` allows
    x in [0, 8] and y in [0, 4].

    Raises:
        BadGridSizeError: wrong token count, non-integer, or negative value.
    """
    tokens = line.split(" ")
    if len(tokens) != 2:
        raise BadGridSizeError(f"expected 2 tokens, got {len(tokens)}: {line!r}")
    height, width = (_to_int(token) for token in tokens)
    if height is None or width is None:
        raise BadGridSizeError(f"non-integer grid size: {line!r}")
    if width < 0 or height < 0:
        raise BadGridSizeError(f"negative grid size: {line!r}")
    return GridSize(width=width, height=height)


def parse_rover_descriptor(line: str, grid: GridSize) -> RoverDescriptor:
    """Parse ``"(x, y, D) INSTRUCTIONS"`` into a :class:`RoverDescriptor`.

    The whole line must match. The direction letter must be one of N/E/S/W
    and every instruction one of F/L/R. Only then are the starting
    coordinates checked against *grid*.

    Raises:
        InvalidRoverDetailsError: format or letter not recognised.
        OutOfBoundsRoverError: well-formed, but the start lies off the grid.
    """
    match = _ROVER_PATTERN.fullmatch(line)
    if match is None:
        raise InvalidRoverDetailsError(f"unrecognised rover line: {line!r}")

    raw_x, raw_y, raw_direction, raw_instructions = match.groups()
    x, y = _to_int(raw_x), _to_int(raw_y)
    if x is None or y is None:
        raise InvalidRoverDetailsError(f"coordinate out of integer range: {line!r}")
    try:
        direction = Direction(raw_direction)
        instructions = tuple(Instruction(char) for char in raw_instructions)
    except ValueError as exc:
        raise InvalidRoverDetailsError(str(exc)) from exc

    coordinates = Coordinates(x, y)
    if not is_in_bounds(coordinates, grid):
        raise OutOfBoundsRoverError(
            f"start {coordinates.x},{coordinates.y} outside {grid.width}x{grid.height}"
        )
    return RoverDescriptor(RoverPosition(coordinates, direction), instructions)
