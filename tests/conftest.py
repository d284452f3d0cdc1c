"""Shared pytest fixtures and test helpers for roverctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from roverctl.domain.geometry import Coordinates, Direction, GridSize, RoverPosition
from roverctl.services.telemetry import _current_span, disable_telemetry

SAMPLE_INPUT = ["4 8", "(2, 3, E) LFRFF", "(0, 2, N) FFLFRFF"]
SAMPLE_REPORT = "(4, 4, E)\n(0, 4, W) LOST"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` enables telemetry for the whole thread; switch it back off."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def grid() -> GridSize:
    """The grid read from the line ``"4 8"``."""
    return GridSize(width=8, height=4)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def pos(x: int, y: int, direction: str) -> RoverPosition:
    """Build a RoverPosition from plain values: ``pos(1, 2, "N")``."""
    return RoverPosition(Coordinates(x, y), Direction(direction))


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp dir so no stray roverctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("ROVERCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
