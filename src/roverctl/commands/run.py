"""Command: read a grid and rovers, then report where each rover ended up."""

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
  roverctl run
  roverctl run --input rovers.txt
  printf '5 5\\n(1, 2, N) LFLFLFLFF\\n' | roverctl run
  roverctl --json run --input rovers.txt"""
)
@click.pass_obj
def run(app: AppContext, source: TextIO | None) -> None:
    """Simulate rovers from input lines and print their final positions."""
    from roverctl.output.renderers import HEADING, render_banner
    from roverctl.services.simulation import SimulationService

    interactive = source is None and app.interactive
    if interactive and app.settings.session.show_banner:
        click.echo(render_banner())

    result = SimulationService().run(app.line_reader(source))

    if result.ok and interactive and app.settings.report.show_heading and not app.settings.quiet:
        click.echo(HEADING)
    app.emit(result)
