"""Unit tests for mean and population standard deviation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from touchcal.errors import InsufficientSamplesError
from touchcal.fitting.statistics import mean, stddev


class TestMean:
    def test_simple_mean(self) -> None:
        assert mean([1.0, 2.0, 3.0, 4.0]) == pytest.approx(2.5)

    def test_accepts_arrays(self) -> None:
        assert mean(np.array([2.0, 4.0])) == pytest.approx(3.0)

    def test_empty_raises(self) -> None:
        with pytest.raises(InsufficientSamplesError) as info:
            mean([])
        assert info.value.required == 1
        assert info.value.received == 0


class TestStddev:
    def test_population_stddev(self) -> None:
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert stddev(values, mean(values)) == pytest.approx(2.0)

    def test_constant_values_are_zero(self) -> None:
        assert stddev([3.0, 3.0, 3.0], 3.0) == 0.0

    def test_uses_supplied_mean(self) -> None:
        # About 0 instead of the true mean of 2
        assert stddev([1.0, 3.0], 0.0) == pytest.approx(math.sqrt(5.0))

    def test_empty_raises(self) -> None:
        with pytest.raises(InsufficientSamplesError):
            stddev([], 0.0)
