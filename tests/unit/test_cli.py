"""Tests for text output and the command-line entry point."""

from __future__ import annotations

import logging

import pytest

from touchcal import cli
from touchcal.errors import NoValidCandidateError
from touchcal.fitting.selection import DeviceCalibration
from touchcal.logging import PACKAGE_LOGGER_NAME
from touchcal.reporting import format_device_line


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in original:
            logger.removeHandler(handler)


def test_format_device_line() -> None:
    assert format_device_line(DeviceCalibration(bias=-1.5, scale=2.0)) == "Bias=-1.500000, Scale=2.000000"


def test_main_prints_two_lines(capsys) -> None:
    assert cli.main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "OptimizationResult{Type=diameter, Scale=0.761745, Bias=0.445273, Error=0.203970}",
        "Bias=7.395980, Scale=12.652592",
    ]


def test_main_reports_failure(monkeypatch, capsys) -> None:
    def _fail(*args, **kwargs):
        raise NoValidCandidateError("No reporting style produced a valid fit")

    monkeypatch.setattr(cli, "calibrate", _fail)
    assert cli.main() == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Calibration failed" in captured.err
