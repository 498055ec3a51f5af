"""Property tests for the line fit and RMS error."""

from __future__ import annotations

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from touchcal.errors import DegenerateVarianceError
from touchcal.fitting.linear_fit import fit_line, rms_error
from touchcal.measurement import Measurement

finite = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False)
measurements = st.lists(st.builds(Measurement, finite, finite), min_size=1, max_size=30)


@given(samples=measurements, slope=finite, intercept=finite)
def test_rms_error_non_negative(samples, slope, intercept) -> None:
    assert rms_error(samples, slope, intercept) >= 0.0


@settings(max_examples=50)
@given(
    slope=st.floats(min_value=0.5, max_value=50.0),
    negative=st.booleans(),
    intercept=st.floats(min_value=-100.0, max_value=100.0),
    reported=st.lists(
        st.integers(min_value=0, max_value=100), min_size=3, max_size=20, unique=True,
    ),
)
def test_exact_line_is_recovered(slope, negative, intercept, reported) -> None:
    if negative:
        slope = -slope
    samples = [Measurement(slope * r + intercept, float(r)) for r in reported]
    fit = fit_line(samples)
    assert abs(fit.slope - slope) <= 1e-6 * abs(slope)
    assert abs(fit.intercept - intercept) <= 1e-4 * max(1.0, abs(slope) * 100.0)
    assert rms_error(samples, fit.slope, fit.intercept) <= 1e-4 * max(1.0, abs(slope) * 100.0)


@given(samples=st.lists(st.builds(Measurement, finite, finite), min_size=2, max_size=30))
def test_fit_is_deterministic(samples) -> None:
    assume(len({m.reported for m in samples}) > 1)
    assume(len({m.physical for m in samples}) > 1)
    try:
        first = fit_line(samples)
    except DegenerateVarianceError:
        return
    assert fit_line(samples) == first
    assert rms_error(samples, first.slope, first.intercept) == rms_error(
        samples, first.slope, first.intercept,
    )
