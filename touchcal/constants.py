"""Constants used across the touchcal project.

The calibration dataset and the panel density are inputs to the calibration
run, not part of the fitting code: :func:`touchcal.fitting.calibrate` takes
both as parameters and only the command-line entry point passes these
defaults in.
"""

from __future__ import annotations

from touchcal.units import PhysicalConstant

# =============================================================================
# Device constants
# =============================================================================

DEFAULT_DPI = PhysicalConstant(
    value=16.61,
    unit="px/mm",
    source="Panel resolution divided by active area width",
    notes="Converts millimeter scale/bias into the units of the device configuration file",
)

# =============================================================================
# Calibration dataset
# =============================================================================

# (physical contact size in mm, reported touch-major value)
CALIBRATION_PAIRS: tuple[tuple[float, float], ...] = (
    (4.85, 6.0),
    (6.9, 8.0),
    (8.85, 11.0),
    (11.0, 14.0),
    (13.91, 18.0),
    (21.91, 28.0),
)

# =============================================================================
# Numerical tolerances
# =============================================================================

# Residual below which a fit is treated as exact
RMS_TOLERANCE = 1e-9

MIN_FIT_SAMPLES = 2
