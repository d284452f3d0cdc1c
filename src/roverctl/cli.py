"""The ``roverctl`` entry point: global output flags plus the subcommands."""

from __future__ import annotations

from typing import Any

import click

from roverctl import __version__
from roverctl.commands._context import AppContext
from roverctl.commands.run import run
from roverctl.commands.validate import validate
from roverctl.config.settings import RoverSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="roverctl")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the report or the error sentence.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs, error codes and timing.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-interact", is_flag=True, help="Never prompt, even on a terminal.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this roverctl.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, no_interact: bool, config_path: str | None, **flags: Any) -> None:
    """roverctl — simulate rovers on a bounded grid."""
    settings = RoverSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings, interactive=not no_interact)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(run)
cli.add_command(validate)
