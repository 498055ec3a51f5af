"""Paired ground-truth / reported contact size samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np


@dataclass(frozen=True)
class Measurement:
    """One calibration sample."""

    # Physical size of the contact in mm
    physical: float
    # Unit-less size reported by the digitizer (ABS_MT_TOUCH_MAJOR)
    reported: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> Measurement:
        """Build from a ``(physical, reported)`` pair."""
        physical, reported = pair
        return cls(float(physical), float(reported))


MeasurementLike = Union[Measurement, Sequence[float]]


def measurements_from_pairs(pairs: Iterable[MeasurementLike]) -> list[Measurement]:
    """Normalize pairs and Measurements into a list, preserving order."""
    return [p if isinstance(p, Measurement) else Measurement.from_pair(p) for p in pairs]


def as_arrays(samples: Sequence[Measurement]) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(reported, physical)`` as float arrays."""
    reported = np.array([m.reported for m in samples], dtype=float)
    physical = np.array([m.physical for m in samples], dtype=float)
    return reported, physical
