"""
AutoAxis - Unit Tests for Transform Selection
"""

import pytest

from auto.transform_selector import define_transform, transform_for_skew
from core.field import Field, FieldKind


class TestTransformForSkew:
    """Tests for the skew rule"""

    def test_no_skew_is_linear(self):
        """Missing skew falls back to linear"""
        assert transform_for_skew(None, 1.0, 1000.0) == "linear"

    def test_log_for_strong_skew_and_wide_positive_range(self):
        """skew > 2, min > 0 and max > 75 * min gives log"""
        assert transform_for_skew(3.5, 1.0, 1000.0) == "log"

    def test_root_for_moderate_skew_from_zero(self):
        """skew 1.5 with min 0 gives root"""
        assert transform_for_skew(1.5, 0.0, 50.0) == "root"

    def test_strong_skew_with_zero_min_is_root(self):
        """A zero minimum rules out log"""
        assert transform_for_skew(5.0, 0.0, 1000.0) == "root"

    def test_strong_skew_with_narrow_range_is_root(self):
        """max not above 75 * min rules out log"""
        assert transform_for_skew(5.0, 2.0, 150.0) == "root"

    def test_log_checked_before_root(self):
        """Data eligible for both gets log"""
        assert transform_for_skew(2.5, 2.0, 151.0) == "log"

    def test_negative_min_is_linear(self):
        """Negative values rule out both transforms"""
        assert transform_for_skew(3.0, -1.0, 1000.0) == "linear"

    def test_low_skew_is_linear(self):
        """Skew at or below 1 stays linear"""
        assert transform_for_skew(1.0, 0.0, 50.0) == "linear"
        assert transform_for_skew(-2.0, 1.0, 50.0) == "linear"


class TestDefineTransform:
    """Tests for define_transform"""

    def test_outlier_field_is_log(self):
        """[1, 2, 2, 3, 1000] is strongly skewed and wide"""
        field = Field("x", [1.0, 2.0, 2.0, 3.0, 1000.0], FieldKind.NUMERIC)
        assert field.num_property("skew") > 2
        assert define_transform(field) == "log"

    def test_result_is_cached_on_field(self, skewed_field):
        """The choice is written back as the transform property"""
        transform = define_transform(skewed_field)
        assert skewed_field.str_property("transform") == transform

    def test_idempotent(self, skewed_field, monkeypatch):
        """Second call returns the cached value without recomputing"""
        first = define_transform(skewed_field)

        import auto.transform_selector as selector

        def fail(*args):
            raise AssertionError("transform recomputed")

        monkeypatch.setattr(selector, "transform_for_skew", fail)
        assert define_transform(skewed_field) == first

    def test_preset_transform_is_terminal(self, skewed_field):
        """A transform set beforehand is never overridden"""
        skewed_field.set("transform", "linear")
        assert define_transform(skewed_field) == "linear"

    def test_too_few_values_is_linear(self):
        """Skew is undefined below three values"""
        field = Field("x", [1.0, 100.0], FieldKind.NUMERIC)
        assert define_transform(field) == "linear"

    @pytest.mark.parametrize("values", [[5.0] * 10, [None, None, None]])
    def test_degenerate_fields_are_linear(self, values):
        """Constant or empty fields have no skew"""
        assert define_transform(Field("x", values, FieldKind.NUMERIC)) == "linear"
