"""AppContext: settings, line source and result printing for the subcommands.

The root group builds one per invocation and hands it down with
``@click.pass_obj``.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from roverctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roverctl.config.settings import RoverSettings
    from roverctl.services.result import ServiceResult
    from roverctl.services.session import LineReader


def stream_reader(stream: TextIO) -> LineReader:
    """Read lines from *stream*, dropping line endings. Returns None at EOF."""

    def read_line() -> str | None:
        raw = stream.readline()
        if raw == "":
            return None
        return raw.rstrip("\r\n")

    return read_line


def prompt_reader(prompt: str) -> LineReader:
    """Read lines from an interactive terminal. Ctrl-D / Ctrl-C end the input."""

    def read_line() -> str | None:
        try:
            return click.prompt(prompt, default="", show_default=False, prompt_suffix="")
        except click.Abort:
            return None

    return read_line


class AppContext:
    """Configures logging and telemetry once, then serves the subcommands."""

    def __init__(self, settings: RoverSettings, *, interactive: bool = True) -> None:
        self.settings = settings
        self._interactive = interactive

        from roverctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from roverctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def interactive(self) -> bool:
        """True when input comes from a person at a terminal."""
        return self._interactive and not self.settings.json_output and sys.stdin.isatty()

    def line_reader(self, source: TextIO | None) -> LineReader:
        """Pick the line source: an explicit file, a terminal prompt, or piped stdin."""
        if source is not None:
            return stream_reader(source)
        if self.interactive:
            return prompt_reader(self.settings.session.prompt)
        return stream_reader(click.get_text_stream("stdin"))

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: stdout on success, stderr plus exit code 1 on failure."""
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
