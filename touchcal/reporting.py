"""Text rendering of calibration results."""

from __future__ import annotations

from touchcal.fitting.selection import CalibrationReport, DeviceCalibration, OptimizationResult


def format_result(result: OptimizationResult) -> str:
    return str(result)


def format_device_line(device: DeviceCalibration) -> str:
    """Line in the form copied into the device configuration file."""
    return f"Bias={device.bias:f}, Scale={device.scale:f}"


def render_report(report: CalibrationReport) -> list[str]:
    """The winning result followed by the device line."""
    return [format_result(report.best), format_device_line(report.device)]
