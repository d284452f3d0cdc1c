"""Tests for the validate CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from roverctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"], input="4 8\n(2, 3, E) LFRFF\n")
        assert result.exit_code == 0
        assert "OK  1 rover ready to rove" in result.stdout
        assert "grid: x 0..8, y 0..4" in result.stdout
        assert "instructions: 5" in result.stdout

    def test_does_not_simulate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"], input="0 0\n(0, 0, N) FFFF\n")
        assert result.exit_code == 0
        assert "LOST" not in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate"], input="4 8\n(2, 3, E) LFRFF\n")
        data = json.loads(result.stdout)
        assert data["op"] == "validate"
        assert data["data"]["instructions"] == 5

    def test_invalid_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"], input="4 8\n(2, 3) LFR\n")
        assert result.exit_code == 1
        assert "Could not parse the rover details" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "roverctl --json validate < rovers.txt" in result.output
