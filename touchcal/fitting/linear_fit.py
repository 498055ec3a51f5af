"""
Least-squares line fit of physical size against reported size.

The slope is derived from the Pearson correlation coefficient and the ratio of
the population standard deviations, which is the ordinary least-squares
solution for ``physical = slope * reported + intercept``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from touchcal.constants import MIN_FIT_SAMPLES
from touchcal.errors import DegenerateVarianceError, InsufficientSamplesError
from touchcal.fitting.statistics import mean, stddev
from touchcal.logging import get_logger
from touchcal.measurement import Measurement, as_arrays

log = get_logger(__name__)


@dataclass(frozen=True)
class FitResult:
    """Line ``physical ~= slope * reported + intercept``."""

    slope: float
    intercept: float

    def predict(self, reported: float) -> float:
        return reported * self.slope + self.intercept


def _check_spread(values: np.ndarray, axis: str) -> None:
    if np.all(values == values[0]):
        raise DegenerateVarianceError(axis, "all values are identical")


def fit_line(samples: Sequence[Measurement]) -> FitResult:
    """
    Fit a line through the samples.

    Args:
        samples: At least two measurements with varying reported and
            physical values

    Returns:
        FitResult with slope and intercept

    Raises:
        InsufficientSamplesError: fewer than two samples
        DegenerateVarianceError: no spread on either axis
    """
    if len(samples) < MIN_FIT_SAMPLES:
        raise InsufficientSamplesError(required=MIN_FIT_SAMPLES, received=len(samples))

    x, y = as_arrays(samples)
    _check_spread(x, "reported")
    _check_spread(y, "physical")

    mean_x = mean(x)
    mean_y = mean(y)
    mean_x2 = mean(x * x)
    mean_y2 = mean(y * y)
    mean_xy = mean(x * y)

    std_x = stddev(x, mean_x)
    std_y = stddev(y, mean_y)
    if std_x == 0.0:
        raise DegenerateVarianceError("reported", "standard deviation is zero")

    covariance_num = mean_xy - mean_x * mean_y
    denom_sq = (mean_x2 - mean_x * mean_x) * (mean_y2 - mean_y * mean_y)
    if not math.isfinite(denom_sq) or denom_sq <= 0.0:
        raise DegenerateVarianceError("reported", f"correlation denominator is {denom_sq!r}")
    correlation = covariance_num / math.sqrt(denom_sq)

    slope = correlation * (std_y / std_x)
    intercept = mean_y - slope * mean_x
    log.debug(f"Fit over {len(samples)} samples: r={correlation:.6f}, slope={slope:.6f}, intercept={intercept:.6f}")
    return FitResult(slope=slope, intercept=intercept)


def rms_error(samples: Sequence[Measurement], slope: float, intercept: float) -> float:
    """Root-mean-square residual of ``physical`` against the line."""
    if len(samples) == 0:
        raise InsufficientSamplesError(required=1, received=0)
    x, y = as_arrays(samples)
    residual = y - (x * slope + intercept)
    return float(np.sqrt(np.mean(residual * residual)))
