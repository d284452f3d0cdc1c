"""Report formatting and ServiceResult output dispatch.

The report itself is plain text: one ``(x, y, D)`` line per rover, with
`` LOST`` appended for rovers that left the grid. The dispatcher adapts a
ServiceResult to the requested output mode (JSON, quiet, or Rich).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from roverctl.domain.geometry import RoverPosition
    from roverctl.domain.interpreter import RoverOutcome
    from roverctl.services.result import ServiceResult

LOST_MARKER = "LOST"


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_position(position: RoverPosition) -> str:
    """Render a position as ``(x, y, D)``."""
    coords = position.coordinates
    return f"({coords.x}, {coords.y}, {position.direction.value})"


def format_outcome(outcome: RoverOutcome) -> str:
    line = format_position(outcome.position)
    if outcome.lost:
        return f"{line} {LOST_MARKER}"
    return line


def format_report(outcomes: Iterable[RoverOutcome]) -> str:
    """Join one line per rover with newlines, in input order."""
    return "\n".join(format_outcome(o) for o in outcomes)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult as JSON, the quiet one-liner, or Rich text."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from roverctl.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
