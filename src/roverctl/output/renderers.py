"""Human-readable output for the ``simulate`` and ``validate`` results.

Every renderer returns a list of Rich renderables; :func:`render_result`
prints them with :func:`~roverctl.output.console.capture`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from roverctl.output.console import capture
from roverctl.output.formatters import LOST_MARKER

if TYPE_CHECKING:
    from rich.console import RenderableType

    from roverctl.services.result import ServiceResult

HEADING = "Nice job! This is where your rovers ended up:"

_INSTRUCTIONS = """\
Now let's get roving! Please enter details of your map grid and rovers as follows:

- The first entry should be the size of your grid in the format x y. e.g. 5 4

- Subsequent entries each represent a rover and their movement in the format (x, y, D) <movement>. e.g. (1, 3, N) FLLFRF
  - x and y represent the starting co-ordinates for the rover
  - D represents the direction the rover is facing and can be N for North, E for East, S for South, or W for West
  - <movement> is a list of instructions, options are F for forward, L for left, R for right

Enter a blank line when you have finished providing input"""

SLOW_SPAN_MS = 100.0


def render_banner() -> str:
    """Welcome panel and input instructions shown before interactive input."""
    title = Panel(Text("Welcome to Mars Rover!", style="rover.title"), expand=False)
    return capture(title, Text(_INSTRUCTIONS), soft_wrap=True)


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    if not result.ok:
        renderables = _error(result, verbose=verbose)
    elif result.op == "validate":
        renderables = _validate_summary(result.data)
    else:
        renderables = _report_lines(str(result.data.get("report", "")))

    timing = (result.meta or {}).get("telemetry")
    if verbose and timing:
        renderables += [Text(), _span_tree(timing)]
    return capture(*renderables)


def render_quiet(result: ServiceResult) -> str:
    """The report, the bare error sentence, or ``OK`` for a clean validate."""
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    return str(result.data.get("report", "OK"))


def _report_lines(report: str) -> list[RenderableType]:
    suffix = f" {LOST_MARKER}"
    lines: list[RenderableType] = []
    for line in report.splitlines():
        if line.endswith(suffix):
            lines.append(Text.assemble(line[: -len(suffix)], " ", (LOST_MARKER, "rover.lost")))
        else:
            lines.append(Text(line))
    return lines


def _validate_summary(data: dict[str, Any]) -> list[RenderableType]:
    grid = data.get("grid", {})
    rovers = data.get("rovers", 0)
    instructions = data.get("instructions", 0)
    return [
        Text.assemble(("OK", "rover.ok"), f"  {_count(rovers, 'rover')} ready to rove"),
        Text(f"  grid: x 0..{grid.get('width')}, y 0..{grid.get('height')}"),
        Text(f"  instructions: {instructions}"),
    ]


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def _error(result: ServiceResult, *, verbose: bool) -> list[RenderableType]:
    err = result.error
    if err is None:
        return [Text("Unknown error", style="rover.error")]
    lines: list[RenderableType] = [Text(err.message, style="rover.error")]
    if verbose:
        reason = err.detail.get("reason")
        lines.append(Text(f"{err.code}: {reason}" if reason else err.code, style="dim"))
    return lines


def _span_label(span: dict[str, Any]) -> Text:
    ms = span.get("duration_ms", 0.0)
    style = "rover.slow" if ms > SLOW_SPAN_MS else "dim"
    label = Text.assemble((f"{ms:.2f}ms", style), "  ", span.get("name", "?"))
    notes = span.get("annotations") or {}
    if notes:
        label.append("  " + ", ".join(f"{k}={v}" for k, v in notes.items()), style="dim")
    return label


def _span_tree(span: dict[str, Any], parent: Tree | None = None) -> Tree:
    label = _span_label(span)
    node = Tree(label) if parent is None else parent.add(label)
    for child in span.get("children", []):
        _span_tree(child, node)
    return node
