"""Exception hierarchy for calibration failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touchcal.measurement import Measurement


class CalibrationError(Exception):
    """Base class for all calibration errors."""


class InsufficientSamplesError(CalibrationError):
    """Raised when a computation receives fewer samples than it needs."""

    def __init__(self, required: int, received: int):
        self.required = required
        self.received = received
        super().__init__(f"At least {required} samples required, got {received}")


class DegenerateVarianceError(CalibrationError):
    """Raised when one axis of the samples has no spread to fit against."""

    def __init__(self, axis: str, detail: str = ""):
        self.axis = axis
        message = f"No variance in {axis} values"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NegativeReportedValueError(CalibrationError):
    """Raised when a square root is requested of a negative reported value."""

    def __init__(self, measurement: Measurement):
        self.measurement = measurement
        super().__init__(
            f"Reported value must be non-negative for area reporting, got {measurement.reported}",
        )


class NoValidCandidateError(CalibrationError):
    """Raised when model selection has no valid candidate to choose from."""
