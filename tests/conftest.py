"""
Pytest configuration for the touchcal test suite.

Provides the bundled calibration dataset and a synthetic exact line as
shared fixtures.
"""

import pytest

from touchcal.constants import CALIBRATION_PAIRS
from touchcal.measurement import Measurement, measurements_from_pairs


@pytest.fixture
def calibration_samples() -> list[Measurement]:
    return measurements_from_pairs(CALIBRATION_PAIRS)


@pytest.fixture
def exact_line_samples() -> list[Measurement]:
    """Samples on physical = 2 * reported + 3."""
    return [Measurement(2.0 * r + 3.0, r) for r in (1.0, 2.5, 4.0, 7.0, 11.0, 20.0)]
