"""Command-line entry point: calibrate against the bundled dataset."""

from __future__ import annotations

import sys

from touchcal.constants import CALIBRATION_PAIRS, DEFAULT_DPI
from touchcal.errors import CalibrationError
from touchcal.fitting import calibrate
from touchcal.logging import configure_cli_logging, get_logger
from touchcal.reporting import render_report

log = get_logger(__name__)


def main() -> int:
    configure_cli_logging()
    try:
        report = calibrate(CALIBRATION_PAIRS, DEFAULT_DPI)
    except CalibrationError as exc:
        log.error(f"Calibration failed: {exc}")
        return 1

    for line in render_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
