"""Session builder — read raw lines into a validated SimulationSetup.

A two-state machine driven by a simple loop:

- AWAITING_GRID_SIZE: the next non-blank line must be a grid size.
- AWAITING_ROVERS_OR_END: every non-blank line must be a rover descriptor.

A blank line or end of input finishes the session. The first parse
failure aborts it; nothing read so far is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum

from roverctl.domain.descriptors import (
    RoverDescriptor,
    SimulationSetup,
    parse_grid_size,
    parse_rover_descriptor,
)
from roverctl.domain.errors import NoInputError, NoRoversError
from roverctl.domain.geometry import GridSize

logger = logging.getLogger(__name__)

LineReader = Callable[[], str | None]


class SessionState(StrEnum):
    AWAITING_GRID_SIZE = "awaiting_grid_size"
    AWAITING_ROVERS_OR_END = "awaiting_rovers_or_end"


class SessionBuilder:
    """Accumulates one grid size and its rovers, line by line.

    Usage::

        builder = SessionBuilder()
        for line in lines:
            builder.feed(line)
        setup = builder.finish()
    """

    def __init__(self) -> None:
        self.state = SessionState.AWAITING_GRID_SIZE
        self._grid: GridSize | None = None
        self._rovers: list[RoverDescriptor] = []

    def feed(self, line: str) -> None:
        """Consume one non-blank line. Raises ``RoverInputError`` on bad input."""
        grid = self._grid
        if grid is None:
            self._grid = parse_grid_size(line)
            self.state = SessionState.AWAITING_ROVERS_OR_END
            logger.debug("Grid size recorded: %sx%s", self._grid.width, self._grid.height)
            return

        rover = parse_rover_descriptor(line, grid)
        self._rovers.append(rover)
        logger.debug("Rover %d recorded", len(self._rovers))

    def finish(self) -> SimulationSetup:
        """Close the session and return the completed setup.

        Raises:
            NoInputError: no grid size was ever read.
            NoRoversError: a grid size was read but no rovers followed it.
        """
        if self._grid is None:
            raise NoInputError()
        if not self._rovers:
            raise NoRoversError()
        return SimulationSetup(grid=self._grid, rovers=tuple(self._rovers))


def build_setup(read_line: LineReader) -> SimulationSetup:
    """Pull lines from *read_line* until a blank line or ``None``, then finish."""
    builder = SessionBuilder()
    while True:
        line = read_line()
        if line is None or line == "":
            break
        builder.feed(line)
    return builder.finish()


def lines_reader(lines: Iterable[str]) -> LineReader:
    """Adapt any iterable of lines into a reader that returns None when exhausted."""
    iterator = iter(lines)

    def read_line() -> str | None:
        return next(iterator, None)

    return read_line
