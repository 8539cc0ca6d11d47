"""
AutoAxis - Unit Tests for the Scale Builder
"""

from datetime import datetime

import pytest

from auto.scale_builder import make_numeric_scale
from core.dates import DateUnit, to_days
from scales.extent import NumericExtentDetail
from scales.numeric_scale import NumericScale


@pytest.fixture
def calls(monkeypatch):
    """Record which scale constructor is used and with what arguments"""
    recorded = []

    def recorder(kind):
        def make(*args):
            recorded.append((kind, args))
            return kind
        return make

    monkeypatch.setattr(NumericScale, "make_linear_scale", recorder("linear"))
    monkeypatch.setattr(NumericScale, "make_log_scale", recorder("log"))
    monkeypatch.setattr(NumericScale, "make_date_scale", recorder("date"))
    return recorded


class TestDelegation:
    """Tests for constructor selection"""

    def test_linear_by_default(self, calls):
        """Linear extents use the linear constructor"""
        extent = NumericExtentDetail(low=1.0, high=10.0)
        assert make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 5, False) == "linear"

    def test_log_transform(self, calls):
        """Log extents use the log constructor"""
        extent = NumericExtentDetail(low=1.0, high=1000.0, transform="log")
        assert make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 5, False) == "log"

    @pytest.mark.parametrize("transform", ["linear", "log", "root"])
    def test_date_unit_wins_over_transform(self, calls, transform):
        """Any extent with a date unit goes to the date constructor"""
        extent = NumericExtentDetail(
            low=0.0, high=365.0, date_unit=DateUnit.DAY, transform=transform
        )
        assert make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 5, False) == "date"
        assert [kind for kind, _ in calls] == ["date"]


class TestTickCount:
    """Tests for the automatic tick count"""

    @pytest.mark.parametrize("bins, expected", [(2, 3), (7, 8), (20, 21), (50, 21)])
    def test_automatic_tick_count(self, calls, bins, expected):
        """Ticks < 1 become min(optimal_bin_count, 20) + 1"""
        extent = NumericExtentDetail(low=0.0, high=10.0, optimal_bin_count=bins)
        make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 0, False)
        _, args = calls[0]
        assert args[4] == expected

    def test_explicit_tick_count_kept(self, calls):
        """Ticks >= 1 pass through unchanged"""
        extent = NumericExtentDetail(low=0.0, high=10.0, optimal_bin_count=50)
        make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 4, False)
        _, args = calls[0]
        assert args[4] == 4

    def test_automatic_tick_count_for_dates(self, calls):
        """The date path gets the same automatic tick count"""
        extent = NumericExtentDetail(
            low=0.0, high=10.0, date_unit=DateUnit.DAY, optimal_bin_count=9
        )
        make_numeric_scale(extent, True, [0.0, 0.0], 0.1, -1, False)
        _, args = calls[0]
        assert args[3] == 10


class TestRootCorrection:
    """Tests for the root-transform padding correction"""

    def test_positive_low_shrinks_padding_and_tolerance(self, calls):
        """Scaling = (low/high) / (sqrt(low)/sqrt(high)) = 0.2 for 4..100"""
        extent = NumericExtentDetail(low=4.0, high=100.0, transform="root")
        pad = [0.5, 0.1]
        make_numeric_scale(extent, True, pad, 0.1, 5, False)

        _, args = calls[0]
        assert pad[0] == pytest.approx(0.1)
        assert pad[1] == pytest.approx(0.1)
        assert args[2] == pytest.approx(0.02)
        assert args[3] is pad

    def test_zero_low_left_uncorrected(self, calls):
        """low == 0 keeps padding and tolerance unchanged"""
        extent = NumericExtentDetail(low=0.0, high=100.0, transform="root")
        pad = [0.5, 0.1]
        make_numeric_scale(extent, True, pad, 0.1, 5, False)

        _, args = calls[0]
        assert pad == [0.5, 0.1]
        assert args[2] == 0.1

    def test_linear_transform_not_corrected(self, calls):
        """Only root extents are corrected"""
        extent = NumericExtentDetail(low=4.0, high=100.0)
        pad = [0.5, 0.1]
        make_numeric_scale(extent, True, pad, 0.1, 5, False)
        assert pad == [0.5, 0.1]


class TestEndToEnd:
    """Tests through the real scale constructors"""

    def test_linear_nice_scale(self):
        """3.2..97 pins to zero and rounds to 0..100 by 20"""
        extent = NumericExtentDetail(low=3.2, high=97.0)
        scale = make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 6, False)
        assert scale.type == "linear"
        assert scale.min == 0.0
        assert scale.max == 100.0
        assert scale.divisions == (0.0, 20.0, 40.0, 60.0, 80.0, 100.0)

    def test_monthly_date_scale(self):
        """A year of days gets monthly ticks"""
        extent = NumericExtentDetail(
            low=to_days(datetime(2023, 1, 1)),
            high=to_days(datetime(2023, 12, 31)),
            date_unit=DateUnit.DAY,
        )
        scale = make_numeric_scale(extent, True, [0.0, 0.0], 0.0, 13, False)
        assert scale.date_unit is DateUnit.MONTH
        assert scale.division_dates()[0] == datetime(2023, 1, 1)
        assert scale.division_dates()[-1] == datetime(2024, 1, 1)
        assert len(scale.divisions) == 13
