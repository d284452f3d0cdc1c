"""Tests for report formatting and the format_result dispatcher."""

import json

from roverctl.domain.interpreter import RoverOutcome
from roverctl.output.formatters import (
    OutputSettings,
    format_outcome,
    format_position,
    format_report,
    format_result,
)
from roverctl.services.result import ServiceError, ServiceResult
from tests.conftest import SAMPLE_REPORT, pos


def _ok(op: str = "simulate", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "simulate", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestReport:
    def test_position(self) -> None:
        assert format_position(pos(4, 4, "E")) == "(4, 4, E)"

    def test_negative_coordinates(self) -> None:
        assert format_position(pos(-1, 0, "W")) == "(-1, 0, W)"

    def test_lost_outcome(self) -> None:
        assert format_outcome(RoverOutcome(pos(0, 4, "W"), lost=True)) == "(0, 4, W) LOST"

    def test_report_order_and_join(self) -> None:
        outcomes = [RoverOutcome(pos(4, 4, "E")), RoverOutcome(pos(0, 4, "W"), lost=True)]
        assert format_report(outcomes) == SAMPLE_REPORT

    def test_empty_report(self) -> None:
        assert format_report([]) == ""


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok(report=SAMPLE_REPORT), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["report"] == SAMPLE_REPORT

    def test_json_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_quiet_report(self) -> None:
        output = format_result(_ok(report=SAMPLE_REPORT), settings=OutputSettings(quiet=True))
        assert output == SAMPLE_REPORT

    def test_quiet_error_is_bare_sentence(self) -> None:
        output = format_result(_err(msg="Bad input"), settings=OutputSettings(quiet=True))
        assert output == "Bad input"

    def test_quiet_without_report(self) -> None:
        output = format_result(_ok("validate", rovers=1), settings=OutputSettings(quiet=True))
        assert output == "OK"

    def test_default_report(self) -> None:
        assert format_result(_ok(report=SAMPLE_REPORT)) == SAMPLE_REPORT

    def test_default_error(self) -> None:
        assert format_result(_err(msg="Could not parse the map size")) == "Could not parse the map size"
