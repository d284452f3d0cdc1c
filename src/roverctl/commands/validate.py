"""Command: check grid and rover input without running the simulation."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from roverctl.commands._base import examples_option, input_option

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command()
@input_option
@examples_option(
    """\
  roverctl validate --input rovers.txt
  roverctl --json validate < rovers.txt"""
)
@click.pass_obj
def validate(app: AppContext, source: TextIO | None) -> None:
    """Parse the grid size and rover lines and report what was read."""
    from roverctl.services.simulation import SimulationService

    app.emit(SimulationService().validate(app.line_reader(source)))
