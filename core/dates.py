"""
AutoAxis - Date Utilities
Date units, day-number conversion and unit-aligned rounding.

Dates have a numeric view expressed in (fractional) days since 1970-01-01.
Values are handled as plain ``datetime.datetime`` objects so that the full
calendar range (years 1..9999) is supported.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional

import pandas as pd

__all__ = [
    "EPOCH",
    "DateUnit",
    "to_days",
    "from_days",
    "to_datetime",
]


EPOCH = datetime(1970, 1, 1)
_ONE_DAY = timedelta(days=1)


# ---------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------
def to_datetime(value: date) -> datetime:
    """Normalise dates/timestamps to a naive (UTC) ``datetime``."""
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def to_days(value: date) -> float:
    """Days since the epoch (fractional for times of day)."""
    return (to_datetime(value) - EPOCH) / _ONE_DAY


def from_days(days: float) -> datetime:
    """Inverse of :func:`to_days`."""
    return EPOCH + timedelta(days=float(days))


def _add_months(value: datetime, months: int) -> datetime:
    index = value.year * 12 + (value.month - 1) + months
    return datetime(index // 12, index % 12 + 1, 1)


# ---------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------
class DateUnit(str, Enum):
    """Calendar units used for date ticks, ordered from finest to coarsest."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"

    @property
    def approx_days(self) -> float:
        return _APPROX_DAYS[self]

    @property
    def months(self) -> int:
        """Length in calendar months (0 for sub-month units)."""
        return _MONTHS.get(self, 0)

    @classmethod
    def ordered(cls) -> List["DateUnit"]:
        return list(cls)

    def at_least(self, other: Optional["DateUnit"]) -> bool:
        if other is None:
            return True
        order = DateUnit.ordered()
        return order.index(self) >= order.index(other)

    @classmethod
    def best_for(
        cls,
        span_days: float,
        desired_tick_count: int,
        minimum: Optional["DateUnit"] = None,
    ) -> "DateUnit":
        """
        Finest unit (not finer than ``minimum``) giving at most
        ``desired_tick_count`` intervals over the span.
        """
        desired = max(1, int(desired_tick_count))
        for unit in cls.ordered():
            if not unit.at_least(minimum):
                continue
            if span_days / unit.approx_days <= desired:
                return unit
        return cls.CENTURY

    def floor(self, value: datetime) -> datetime:
        """Largest unit boundary <= value."""
        if self is DateUnit.SECOND:
            return value.replace(microsecond=0)
        if self is DateUnit.MINUTE:
            return value.replace(second=0, microsecond=0)
        if self is DateUnit.HOUR:
            return value.replace(minute=0, second=0, microsecond=0)

        day = datetime(value.year, value.month, value.day)
        if self is DateUnit.DAY:
            return day
        if self is DateUnit.WEEK:
            return day - timedelta(days=day.weekday())

        months = self.months
        index = value.year * 12 + (value.month - 1)
        index -= index % months
        return datetime(index // 12, index % 12 + 1, 1)

    def ceil(self, value: datetime) -> datetime:
        """Smallest unit boundary >= value."""
        floored = self.floor(value)
        return floored if floored == value else self.step(floored, 1)

    def step(self, value: datetime, count: int = 1) -> datetime:
        """Move ``count`` units forward from a unit boundary."""
        if self.months:
            return _add_months(value, self.months * count)
        return value + timedelta(days=self.approx_days * count)

    def is_aligned(self, value: datetime) -> bool:
        return self.floor(value) == value


_APPROX_DAYS = {
    DateUnit.SECOND: 1.0 / 86400.0,
    DateUnit.MINUTE: 1.0 / 1440.0,
    DateUnit.HOUR: 1.0 / 24.0,
    DateUnit.DAY: 1.0,
    DateUnit.WEEK: 7.0,
    DateUnit.MONTH: 365.25 / 12.0,
    DateUnit.QUARTER: 365.25 / 4.0,
    DateUnit.YEAR: 365.25,
    DateUnit.DECADE: 3652.5,
    DateUnit.CENTURY: 36525.0,
}

_MONTHS = {
    DateUnit.MONTH: 1,
    DateUnit.QUARTER: 3,
    DateUnit.YEAR: 12,
    DateUnit.DECADE: 120,
    DateUnit.CENTURY: 1200,
}
