"""
Model selection across reporting styles.

Each style is evaluated independently: transform the samples, fit a line and
score it by RMS residual. The valid result with the smallest error wins and is
scaled by the panel density for the device configuration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from touchcal.constants import MIN_FIT_SAMPLES
from touchcal.errors import CalibrationError, InsufficientSamplesError, NoValidCandidateError
from touchcal.fitting.linear_fit import fit_line, rms_error
from touchcal.fitting.reporting_styles import DEFAULT_STYLES, ReportingStyle
from touchcal.logging import get_logger
from touchcal.measurement import Measurement, MeasurementLike, measurements_from_pairs
from touchcal.units import PhysicalConstant

log = get_logger(__name__)


class CandidateStatus(Enum):
    """Outcome of evaluating one reporting style."""

    COMPLETED = "completed"
    INVALID = "invalid"


@dataclass(frozen=True)
class OptimizationResult:
    """Fitted parameters and score for one reporting style."""

    label: str
    scale: float
    bias: float
    error: float
    status: CandidateStatus = CandidateStatus.COMPLETED
    error_message: str | None = None

    @property
    def is_valid(self) -> bool:
        """Completed with a finite, non-negative error."""
        return (
            self.status == CandidateStatus.COMPLETED
            and math.isfinite(self.error)
            and self.error >= 0.0
        )

    @classmethod
    def invalid(cls, label: str, reason: str) -> OptimizationResult:
        nan = float("nan")
        return cls(label, nan, nan, nan, CandidateStatus.INVALID, reason)

    def __str__(self) -> str:
        return (
            f"OptimizationResult{{Type={self.label}, Scale={self.scale:f}, "
            f"Bias={self.bias:f}, Error={self.error:f}}}"
        )


@dataclass(frozen=True)
class DeviceCalibration:
    """Winning scale and bias converted to device units."""

    bias: float
    scale: float

    @classmethod
    def from_result(cls, result: OptimizationResult, dpi: float | PhysicalConstant) -> DeviceCalibration:
        dpi_value = float(dpi)
        return cls(bias=dpi_value * result.bias, scale=dpi_value * result.scale)


@dataclass(frozen=True)
class CalibrationReport:
    """All candidates evaluated in a run, the winner, and its device values."""

    candidates: tuple[OptimizationResult, ...]
    best: OptimizationResult
    device: DeviceCalibration
    dpi: float

    @property
    def valid_candidates(self) -> tuple[OptimizationResult, ...]:
        return tuple(r for r in self.candidates if r.is_valid)


def evaluate_style(style: ReportingStyle, samples: Sequence[Measurement]) -> OptimizationResult:
    """
    Transform the samples with ``style``, fit a line and score it.

    A CalibrationError during evaluation yields an INVALID result so that the
    remaining styles can still be compared.
    """
    try:
        transformed = style.apply_all(samples)
        fit = fit_line(transformed)
        error = rms_error(transformed, fit.slope, fit.intercept)
    except CalibrationError as exc:
        log.warning(f"Reporting style '{style.name}' excluded: {exc}")
        return OptimizationResult.invalid(style.name, str(exc))

    result = OptimizationResult(style.name, fit.slope, fit.intercept, error)
    log.debug(f"Evaluated {result}")
    return result


def evaluate_styles(
    samples: Sequence[Measurement],
    styles: Iterable[ReportingStyle] = DEFAULT_STYLES,
) -> list[OptimizationResult]:
    """Evaluate every style in order."""
    return [evaluate_style(style, samples) for style in styles]


def select_best(results: Iterable[OptimizationResult]) -> OptimizationResult:
    """
    Pick the valid result with the strictly smallest error.

    Ties keep the earliest result. Invalid results are never selected.

    Raises:
        NoValidCandidateError: no valid result to choose from
    """
    best: OptimizationResult | None = None
    for result in results:
        if not result.is_valid:
            continue
        if best is None or result.error < best.error:
            best = result
    if best is None:
        raise NoValidCandidateError("No reporting style produced a valid fit")
    return best


def calibrate(
    measurements: Iterable[MeasurementLike],
    dpi: float | PhysicalConstant,
    styles: Sequence[ReportingStyle] = DEFAULT_STYLES,
) -> CalibrationReport:
    """
    Run the full calibration.

    Args:
        measurements: Measurements or ``(physical_mm, reported)`` pairs
        dpi: Device density used to scale the winning parameters
        styles: Ordered candidate styles; earlier styles win ties

    Returns:
        CalibrationReport with every candidate, the winner and device values
    """
    samples = measurements_from_pairs(measurements)
    if len(samples) < MIN_FIT_SAMPLES:
        raise InsufficientSamplesError(required=MIN_FIT_SAMPLES, received=len(samples))
    if not styles:
        raise NoValidCandidateError("No reporting styles supplied")

    candidates = tuple(evaluate_styles(samples, styles))
    best = select_best(candidates)
    device = DeviceCalibration.from_result(best, dpi)
    log.info(f"Selected reporting style '{best.label}' (rms error {best.error:.6f} mm)")
    return CalibrationReport(candidates=candidates, best=best, device=device, dpi=float(dpi))
