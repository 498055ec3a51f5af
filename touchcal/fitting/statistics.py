"""Population statistics used by the line fit."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from touchcal.errors import InsufficientSamplesError


def _as_array(values: Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InsufficientSamplesError(required=1, received=0)
    return arr


def mean(values: Sequence[float] | np.ndarray) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return float(np.mean(_as_array(values)))


def stddev(values: Sequence[float] | np.ndarray, mean: float) -> float:
    """Population standard deviation about a supplied mean.

    The mean is taken as given and not recomputed, so callers can reuse the
    value they already hold.
    """
    arr = _as_array(values)
    return float(np.sqrt(np.mean((arr - mean) ** 2)))
