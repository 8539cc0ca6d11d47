"""
AutoAxis - Unit Tests for Bin Estimation
"""

import numpy as np
import pytest

from auto.bin_estimator import optimal_bin_count
from config.constants import BIN_ROUNDING_OFFSET
from core.field import Field, FieldKind


class TestOptimalBinCount:
    """Tests for optimal_bin_count"""

    def test_single_value_gets_two_bins(self):
        """No standard deviation with one value"""
        assert optimal_bin_count(Field("x", [4.0], FieldKind.NUMERIC)) == 2

    def test_constant_values_get_two_bins(self):
        """Zero width from both estimators"""
        assert optimal_bin_count(Field("x", [7.0] * 30, FieldKind.NUMERIC)) == 2

    def test_uniform_one_to_hundred(self, numeric_field):
        """Scott's width (the wider) over 1..100 gives 5 bins"""
        assert optimal_bin_count(numeric_field) == 5

    def test_nulls_are_not_counted(self, numeric_field):
        """Valid count drives the estimate, not the row count"""
        with_nulls = Field(
            "value", list(numeric_field.values) + [None] * 50, FieldKind.NUMERIC
        )
        assert optimal_bin_count(with_nulls) == optimal_bin_count(numeric_field)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_always_at_least_two(self, seed):
        """Any field gets at least two bins"""
        rng = np.random.default_rng(seed)
        values = rng.lognormal(0.0, 2.0, size=int(rng.integers(2, 500)))
        assert optimal_bin_count(Field("x", values, FieldKind.NUMERIC)) >= 2

    def test_more_data_gives_more_bins(self):
        """Bin width shrinks with the cube root of the count"""
        rng = np.random.default_rng(7)
        small = Field("x", rng.normal(size=50), FieldKind.NUMERIC)
        large = Field("x", rng.normal(size=5000), FieldKind.NUMERIC)
        assert optimal_bin_count(large) > optimal_bin_count(small)

    def test_half_rounds_up(self):
        """A bin count landing exactly on .5 rounds up, not to even"""
        field = Field("x", [0.0, 1.0], FieldKind.NUMERIC)
        field.set("valid", 1)
        field.set("stddev", 0.0)
        field.set("q1", 0.0)
        field.set("q3", 0.5)
        field.set("min", 0.0)
        field.set("max", 2.5 - BIN_ROUNDING_OFFSET)  # width 1, raw count 2.5
        assert optimal_bin_count(field) == 3
