"""Instruction interpreter — apply one instruction to one rover position.

INVARIANT: a lost outcome always carries the last valid position, with the
direction the rover was facing when it tried to leave the grid.
"""

from __future__ import annotations

from dataclasses import dataclass

from roverctl.domain.geometry import (
    GridSize,
    Instruction,
    RoverPosition,
    advance,
    is_in_bounds,
    turn_left,
    turn_right,
)


@dataclass(frozen=True)
class RoverOutcome:
    """Result of moving a rover: a position, and whether it was lost getting there."""

    position: RoverPosition
    lost: bool = False


def apply_instruction(
    position: RoverPosition,
    instruction: Instruction,
    grid: GridSize,
) -> RoverOutcome:
    """Apply *instruction* to *position* on *grid*.

    Turns always succeed. A forward move that would leave the grid returns
    a lost outcome holding *position* unchanged.
    """
    if instruction is Instruction.TURN_LEFT:
        return RoverOutcome(RoverPosition(position.coordinates, turn_left(position.direction)))
    if instruction is Instruction.TURN_RIGHT:
        return RoverOutcome(RoverPosition(position.coordinates, turn_right(position.direction)))

    moved = advance(position.coordinates, position.direction)
    if not is_in_bounds(moved, grid):
        return RoverOutcome(position, lost=True)
    return RoverOutcome(RoverPosition(moved, position.direction))
