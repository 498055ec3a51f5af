"""
Fitting and model selection for touch-size calibration.

This module provides the statistics, reporting styles, line fit and
selection used to turn calibration samples into a device scale and bias.
"""

from .linear_fit import FitResult, fit_line, rms_error
from .reporting_styles import (
    DEFAULT_STYLES,
    AreaReporting,
    DiameterReporting,
    ReportingStyle,
    ReportingStyleType,
    get_style,
)
from .selection import (
    CalibrationReport,
    CandidateStatus,
    DeviceCalibration,
    OptimizationResult,
    calibrate,
    evaluate_style,
    evaluate_styles,
    select_best,
)
from .statistics import mean, stddev

__all__ = [
    "AreaReporting",
    "CalibrationReport",
    "CandidateStatus",
    "DEFAULT_STYLES",
    "DeviceCalibration",
    "DiameterReporting",
    "FitResult",
    "OptimizationResult",
    "ReportingStyle",
    "ReportingStyleType",
    "calibrate",
    "evaluate_style",
    "evaluate_styles",
    "fit_line",
    "get_style",
    "mean",
    "rms_error",
    "select_best",
    "stddev",
]
