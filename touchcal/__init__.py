"""touchcal: fit a digitizer's reported touch size against physical contact size."""
from __future__ import annotations

from touchcal.errors import (
    CalibrationError,
    DegenerateVarianceError,
    InsufficientSamplesError,
    NegativeReportedValueError,
    NoValidCandidateError,
)
from touchcal.fitting import CalibrationReport, OptimizationResult, calibrate
from touchcal.logging import get_logger
from touchcal.measurement import Measurement

__version__ = "0.1.0"

log = get_logger(__name__)

__all__ = [
    "CalibrationError",
    "CalibrationReport",
    "DegenerateVarianceError",
    "InsufficientSamplesError",
    "Measurement",
    "NegativeReportedValueError",
    "NoValidCandidateError",
    "OptimizationResult",
    "calibrate",
    "get_logger",
]
