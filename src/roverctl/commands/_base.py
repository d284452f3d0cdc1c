"""Options shared by the ``run`` and ``validate`` commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])

input_option = click.option(
    "--input",
    "source",
    type=click.File("r"),
    default=None,
    help="Read the grid and rover lines from a file instead of stdin.",
)


def examples_option(examples: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *examples* and exits."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )
