"""Rich console used to render human output into a string.

The console writes to a StringIO, so Rich never sees a terminal and emits
no ANSI codes. Commands echo the captured text through click.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console, RenderableType
from rich.theme import Theme

ROVER_THEME = Theme(
    {
        "rover.ok": "bold green",
        "rover.error": "bold red",
        "rover.lost": "bold yellow",
        "rover.title": "bold",
        "rover.slow": "yellow",
    }
)

CONSOLE_WIDTH = 120


def capture(*renderables: RenderableType, soft_wrap: bool = False) -> str:
    """Print *renderables* to a throwaway console and return the text."""
    console = Console(file=StringIO(), theme=ROVER_THEME, highlight=False, width=CONSOLE_WIDTH)
    with console.capture() as captured:
        for renderable in renderables:
            console.print(renderable, soft_wrap=soft_wrap)
    # Tree and Panel pad lines to the console width.
    return "\n".join(line.rstrip() for line in captured.get().rstrip("\n").splitlines())
