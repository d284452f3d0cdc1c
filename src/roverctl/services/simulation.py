"""SimulationService — run every rover and report where it ended up.

Each rover is an independent fold of its instructions over its start
position. The fold stops at the first lost outcome; later instructions
never move a lost rover.
"""

from __future__ import annotations

import logging
from roverctl.domain.descriptors import RoverDescriptor, SimulationSetup
from roverctl.domain.errors import RoverInputError
from roverctl.domain.geometry import GridSize
from roverctl.domain.interpreter import RoverOutcome, apply_instruction
from roverctl.output.formatters import format_outcome, format_report
from roverctl.services.result import ServiceResult
from roverctl.services.session import LineReader, build_setup
from roverctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def simulate_rover(rover: RoverDescriptor, grid: GridSize) -> RoverOutcome:
    """Fold *rover*'s instructions over its start position, stopping when lost."""
    outcome = RoverOutcome(rover.position)
    for instruction in rover.instructions:
        outcome = apply_instruction(outcome.position, instruction, grid)
        if outcome.lost:
            break
    return outcome


def run_rovers(setup: SimulationSetup) -> list[RoverOutcome]:
    """Simulate every rover in *setup*, preserving input order."""
    outcomes: list[RoverOutcome] = []
    for index, rover in enumerate(setup.rovers, start=1):
        outcome = simulate_rover(rover, setup.grid)
        if outcome.lost:
            logger.debug("Rover %d lost at %s", index, format_outcome(outcome))
        outcomes.append(outcome)
    return outcomes


def _rejected(op: str, exc: RoverInputError) -> ServiceResult:
    logger.debug("Input rejected (%s): %s", exc.code, exc)
    return ServiceResult.failure(op, exc)


def _grid_data(grid: GridSize) -> dict[str, int]:
    return {"width": grid.width, "height": grid.height}


class SimulationService:
    """Reads a session from a line source and simulates it."""

    @traced
    def run(self, read_line: LineReader) -> ServiceResult:
        """Build the setup from *read_line*, move every rover, report outcomes."""
        try:
            with trace_span("read_session"):
                setup = build_setup(read_line)
        except RoverInputError as exc:
            return _rejected("simulate", exc)

        with trace_span("simulate") as span:
            outcomes = run_rovers(setup)
            if span:
                span.annotate("rovers", len(outcomes))

        rovers = [
            {
                "x": o.position.coordinates.x,
                "y": o.position.coordinates.y,
                "direction": o.position.direction.value,
                "lost": o.lost,
            }
            for o in outcomes
        ]
        return ServiceResult.success(
            "simulate",
            grid=_grid_data(setup.grid),
            rovers=rovers,
            report=format_report(outcomes),
        )

    @traced
    def validate(self, read_line: LineReader) -> ServiceResult:
        """Parse the session without moving any rover."""
        try:
            setup = build_setup(read_line)
        except RoverInputError as exc:
            return _rejected("validate", exc)
        return ServiceResult.success(
            "validate",
            grid=_grid_data(setup.grid),
            rovers=len(setup.rovers),
            instructions=sum(len(r.instructions) for r in setup.rovers),
        )


def simulate(read_line: LineReader) -> str:
    """Run a whole session and return the report, or the single error sentence."""
    result = SimulationService().run(read_line)
    if result.error is not None:
        return result.error.message
    return str(result.data["report"])
